"""Debug and progress lines read by the host tool from stderr."""

from typing import IO

import click

from ..errors import OutOfRangeError


def emit_debug(message: str, file: IO[str] | None = None) -> None:
    """Write a ``D:`` debug line to stderr, or to ``file`` when given."""
    click.echo(f"D:{message}", file=file, err=True, color=True)


def emit_progress(percent: int, file: IO[str] | None = None) -> None:
    """Write a ``%`` progress line to stderr, or to ``file`` when given.

    Raises:
        OutOfRangeError: If the percentage is not within 0-100.
    """
    if not 0 <= percent <= 100:
        raise OutOfRangeError(f"Percentage has to be in range 0-100, got {percent}.", percent)
    click.echo(f"% {percent}", file=file, err=True, color=True)
