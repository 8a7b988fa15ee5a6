# termlog:header:start
#
#   project      : TermLog
#   file         : color.py
#   file_relpath : src/termlog/terminal/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Click-independent color-mode resolution.

This module provides the `ColorMode` enum parsed from ``--color`` and the
precedence rules that turn it, together with the environment, into the single
``supports_color`` flag of the process-wide
[`AnsiTerminal`][termlog.terminal.ansi.AnsiTerminal].
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from termlog.config.logging import get_logger
from termlog.terminal.ansi import detect_color_support

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termlog.config.logging import TermlogLogger


logger: TermlogLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the terminal type allows it.
        ALWAYS: Force-enable color regardless of the terminal type.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `TERM` is set and not `"dumb"`.

    Args:
        color_mode_override (ColorMode | None): Parsed value from `--color`;
            `None` means "not provided".
        environ (Mapping[str, str] | None): Environment to inspect. Defaults to
            ``os.environ``.

    Returns:
        bool: True if ANSI escape sequences should be emitted.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, environ={"TERM": "dumb"})
        False
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    env = os.environ if environ is None else environ
    force_color: str | None = env.get("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("color forced on by FORCE_COLOR=%r", force_color)
        return True
    if env.get("NO_COLOR") is not None:
        logger.debug("color disabled by NO_COLOR")
        return False

    return detect_color_support(env)
