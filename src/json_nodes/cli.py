"""Command-line interface for JSON Nodes."""

import logging
import click
from pathlib import Path
from . import __version__
from .json_nodes import JSONNodes
from .models import DecoderConfig
from .types import JSONNodesError, ObjectMode


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose: bool):
    """JSON Nodes - Encode and decode JSON the way graph nodes do."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--mode', '-m', type=click.Choice([m.value for m in ObjectMode]),
              default=ObjectMode.DICTIONARY.value, help='Output shape for JSON objects')
@click.option('--raw', is_flag=True, help='Return every scalar as text (deprecated)')
@click.option('--native-null', is_flag=True, help='Decode null as None instead of "null"')
def decode(input_file: Path, mode: str, raw: bool, native_null: bool):
    """Decode a JSON file and print the resulting value."""
    config = DecoderConfig(coerce_scalars=not raw, null_as_text=not native_null)

    try:
        value = JSONNodes(decoder_config=config).from_json_file(input_file, ObjectMode(mode))
    except JSONNodesError as e:
        raise click.ClickException(str(e))

    click.echo(repr(value))


@main.command(name='format')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--indent/--compact', default=True, help='Pretty-print (default) or minimal output')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path')
def format_command(input_file: Path, indent: bool, output: Path):
    """Re-encode a JSON file, pretty-printed or compact."""
    json_nodes = JSONNodes(decoder_config=DecoderConfig(null_as_text=False))

    try:
        value = json_nodes.from_json_file(input_file)
        if output:
            json_nodes.to_json_file(value, output, indent)
            click.echo(f"Wrote {output}")
        else:
            click.echo(json_nodes.to_json_string(value, indent))
    except JSONNodesError as e:
        raise click.ClickException(str(e))


if __name__ == '__main__':
    main()
