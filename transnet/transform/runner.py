"""Run a transform function as a command line program."""

import logging
import sys
from collections.abc import Callable, Sequence
from typing import IO

import click

from .transformation import Transformation

logger = logging.getLogger(__name__)


def run_transform(
    func: Callable[[Transformation], None],
    argv: Sequence[str] | None = None,
    file: IO[str] | None = None,
) -> Transformation:
    """Build a transformation, let ``func`` fill it and print the response.

    Args:
        func: Called with the transformation; adds entities to it.
        argv: Positional arguments. Defaults to ``sys.argv[1:]``.
        file: Where the response XML goes. Defaults to stdout.

    Returns:
        The transformation after ``func`` ran.
    """
    if argv is None:
        argv = sys.argv[1:]

    transformation = Transformation(argv)
    func(transformation)
    logger.debug("Transform returned %d entities", len(transformation.entities))

    click.echo(transformation.to_xml(), file=file, color=True)
    return transformation
