# termlog:header:start
#
#   project      : TermLog
#   file         : cli_types.py
#   file_relpath : src/termlog/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Click parameter types used by the TermLog CLI."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

import click
from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice among the string values of an Enum.

    The converted value is the Enum member, so commands receive e.g.
    `ColorMode.NEVER` rather than ``"never"``.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.members: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted spellings, in declaration order."""
        return list(self.members)

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member named by ``value``; members pass through unchanged."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self.members.get(str(value).strip().lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices as ``[a|b|c]`` in help output."""
        return "[" + "|".join(self.choices) + "]"

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the choices starting with ``incomplete``.

        Bash: `eval "$(_TERMLOG_COMPLETE=bash_source termlog)"`
        """
        prefix: str = incomplete.lower()
        return [CompletionItem(choice) for choice in self.choices if choice.startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
