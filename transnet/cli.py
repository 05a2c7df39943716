"""Command-line interface for transnet."""

import json
import logging
import sys

import click

from .errors import FormatError, OutOfRangeError, StructureError, TransNetError
from .output.formatter import format_transformation
from .schema.errors import FixtureLoadError, FixtureValidationError
from .schema.loader import build_transformation, parse_fixture
from .transform import Transformation


@click.group()
@click.version_option()
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    envvar="TRANSNET_VERBOSE",
    help="Log debug output to stderr",
)
def main(verbose: bool):
    """transnet: tooling for Maltego transform responses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("fixture_file", type=click.Path(exists=True))
def encode(fixture_file: str):
    """Encode a YAML response fixture as response XML.

    FIXTURE_FILE is the path to a YAML fixture.

    Exit codes:
      0 - Success
      2 - File, schema or input error
    """
    try:
        transformation = build_transformation(parse_fixture(fixture_file))
    except FixtureLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except FixtureValidationError as e:
        click.echo(f"Fixture validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except TransNetError as e:
        click.echo(f"Invalid fixture input: {e}", err=True)
        sys.exit(2)

    click.echo(transformation.to_xml())
    sys.exit(0)


@main.command()
@click.argument("response_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    envvar="TRANSNET_FORMAT",
    help="Output format",
)
def inspect(response_file, output_format: str):
    """Decode a response document and summarize its entities.

    RESPONSE_FILE is the path to a response XML file, or - for stdin.

    Exit codes:
      0 - Success
      2 - Document could not be decoded
    """
    try:
        transformation = Transformation.from_xml(response_file.read())
    except StructureError as e:
        click.echo(f"Malformed response: {e}", err=True)
        sys.exit(2)
    except TransNetError as e:
        click.echo(f"Invalid response content: {e}", err=True)
        sys.exit(2)

    output = format_transformation(transformation, output_format)  # type: ignore
    click.echo(output)
    sys.exit(0)


@main.command()
@click.argument("arguments", nargs=-1)
def args(arguments: tuple[str, ...]):
    """Parse transform arguments the way the host tool passes them.

    ARGUMENTS are the 1-3 positional arguments, e.g. an entity value
    followed by a field-pack such as "field1=value1#field2=value2".

    Exit codes:
      0 - Success
      2 - Wrong argument count or format
    """
    try:
        transformation = Transformation(arguments)
    except (OutOfRangeError, FormatError) as e:
        click.echo(f"Invalid arguments: {e}", err=True)
        sys.exit(2)

    data = {
        "input_arguments": transformation.input_arguments,
        "optional_parameter": transformation.optional_parameter,
    }
    click.echo(json.dumps(data, indent=2))
    sys.exit(0)


if __name__ == "__main__":
    main()
