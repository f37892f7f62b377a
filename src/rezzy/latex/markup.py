"""Helpers that format single LaTeX commands."""

from __future__ import annotations

from collections.abc import Sequence

# Environment names take their sizing/placement options after the name,
# e.g. \begin{table}[h] rather than \begin[h]{table}.
ENVIRONMENTS = frozenset({"document", "table", "itemize", "tabularx", "rSection", "center"})


def latex_command(
    name: str,
    args: Sequence[str | None] = (),
    options: str | None = None,
) -> str:
    """Format ``\\name[options]{arg1}{arg2}``.

    Empty and ``None`` arguments are dropped. With no arguments and no
    options the bare ``\\name`` is returned.
    """
    present = [arg for arg in args if arg]
    opt = f"[{options}]" if options else ""
    arg_str = "{" + "}{".join(present) + "}" if present else ""
    if any(arg in ENVIRONMENTS for arg in present):
        return f"\\{name}{arg_str}{opt}"
    return f"\\{name}{opt}{arg_str}"


def latex_new_command(
    name: str,
    num_args: int = 0,
    body: str = "",
    default_value: str | None = None,
) -> str:
    """Format a ``\\newcommand`` definition line."""
    if default_value is not None:
        slot = f"[{default_value}]"
    elif num_args > 0:
        slot = f"[{num_args}]"
    else:
        slot = ""
    return f"\\newcommand{{\\{name}}}{slot}{{{body}}}"
