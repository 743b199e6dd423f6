"""Shared plumbing for the operator tools.

Each tool acquires exactly one database session, runs a fixed sequence of
queries, prints what it found and exits. The session is released on every
path out of the tool, and any uncaught error is logged and turned into
exit code 1.
"""

import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, NoReturn

from sqlmodel import Session

from equinox.core.logging import configure_logging
from equinox.db.engine import engine

logger = logging.getLogger("equinox.ops")

EXIT_OK = 0
EXIT_FAILURE = 1


@contextmanager
def ops_session() -> Iterator[Session]:
    """Open the tool's database session and close it however the tool ends."""
    with Session(engine) as session:
        yield session


def run_tool(name: str, task: Callable[[Session], Any]) -> int:
    """Run ``task`` inside a fresh session and map the outcome to an exit code."""
    tool_logger = logging.getLogger(f"equinox.ops.{name}")
    try:
        with ops_session() as session:
            task(session)
    except Exception:
        tool_logger.exception("%s failed", name, extra={"tool": name})
        return EXIT_FAILURE
    return EXIT_OK


def cli(name: str, task: Callable[[Session], Any]) -> NoReturn:
    """Console-script entry point: configure logging, run, exit."""
    configure_logging()
    sys.exit(run_tool(name, task))


def format_table(rows: Sequence[dict[str, Any]], columns: Sequence[str]) -> str:
    """Render rows as a plain-text table with an index column.

    >>> print(format_table([{"a": 1}], ["a"]))
    (index) | a
    ------- | -
    0       | 1
    """
    header = ["(index)", *columns]
    body = [[str(i), *(str(row.get(col, "")) for col in columns)] for i, row in enumerate(rows)]
    widths = [max(len(cell) for cell in column) for column in zip(header, *body)]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    separator = " | ".join("-" * width for width in widths)
    return "\n".join([line(header), separator, *(line(cells) for cells in body)])
