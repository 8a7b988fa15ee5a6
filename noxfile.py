# termlog:header:start
#
#   project      : TermLog
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# termlog:header:end

"""Nox sessions for TermLog (uv-backed virtualenvs).

Sessions:
  - `lint` / `lint_fixall`: Ruff lint checks, optionally with autofix.
  - `format_check` / `format`: Ruff formatting, check-only or in place.
  - `qa`: pytest (fast tests) and pyright, once per supported Python.
  - `tests_all`: the full pytest suite, including spinner/timer timing tests.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Only `lint` and `format_check` run by default; the multi-Python sessions are
meant for CI or explicit `nox -s qa`.
"""

from __future__ import annotations

import pathlib
import re
import sys
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib as toml_reader
else:
    import toml as toml_reader

PYPROJECT: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
CURRENT_PYTHON: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

_CLASSIFIER_RE = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def supported_pythons() -> list[str]:
    """Return the X.Y Python versions listed in the `pyproject.toml` classifiers.

    Evaluated at noxfile import time, so only the TOML reader is used here.
    Falls back to the running interpreter when no version classifier is found.

    Returns:
        list[str]: Versions such as ``["3.10", "3.11"]``, oldest first.
    """
    try:
        doc: dict[str, Any] = toml_reader.loads(PYPROJECT.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return [CURRENT_PYTHON]

    found: set[tuple[int, int]] = set()
    for classifier in doc.get("project", {}).get("classifiers", []):
        match = _CLASSIFIER_RE.match(classifier)
        if match:
            found.add((int(match.group(1)), int(match.group(2))))
    if not found:
        return [CURRENT_PYTHON]
    return [f"{major}.{minor}" for major, minor in sorted(found)]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


def _install_dev(session: nox.Session) -> None:
    session.install("-r", "requirements-dev.txt")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the fast tests and pyright for one Python version."""
    _install_dev(session)
    session.run("pytest", "-q", "-m", "not slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session(python=CURRENT_PYTHON)
def tests_all(session: nox.Session) -> None:
    """Run every test, including the ones that wait on real timers."""
    _install_dev(session)
    session.run("pytest", "-q", *session.posargs)


@nox.session(python=CURRENT_PYTHON)
def lint(session: nox.Session) -> None:
    """Run ruff lint checks."""
    _install_dev(session)
    session.run("ruff", "check", ".")


@nox.session(python=CURRENT_PYTHON)
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix."""
    _install_dev(session)
    session.run("ruff", "check", "--fix", ".")


@nox.session(python=CURRENT_PYTHON)
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    _install_dev(session)
    session.run("ruff", "format", "--check", ".")


@nox.session(python=CURRENT_PYTHON)
def format(session: nox.Session) -> None:
    """Apply formatting."""
    _install_dev(session)
    session.run("ruff", "format", ".")


@nox.session(python=CURRENT_PYTHON)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel into a clean dist/ and validate them with twine."""
    _install_dev(session)
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
