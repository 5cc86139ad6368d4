"""
Command-line interface for pdfmetax.
"""

import json
import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfmetax import __version__
from pdfmetax.exceptions import PDFMetaxException
from pdfmetax.translator import load_slot_from_path, translate
from pdfmetax.types import TransferOptions
from pdfmetax.utils import configure_logging, format_file_size, format_value, humanize_key, to_jsonable

console = Console()


def _metadata_table(title, metadata):
    table = Table(title=escape(title), show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in metadata.items():
        table.add_row(escape(humanize_key(key)), escape(format_value(value)))
    return table


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(message))}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfmetax - Copy document metadata from one PDF to another.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="show")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', help='Password for encrypted PDFs', type=str)
@click.option('--json', 'as_json', is_flag=True, help='Print metadata as JSON')
def show(input_pdf, password, as_json):
    """
    Display the metadata of a PDF file.

    Examples:

        pdfmetax show report.pdf

        pdfmetax show report.pdf --json
    """
    try:
        slot = load_slot_from_path(input_pdf, password=password)
    except PDFMetaxException as e:
        _fail(f"Loading {os.path.basename(input_pdf)} failed: {e}")

    if as_json:
        click.echo(json.dumps(to_jsonable(slot.metadata), indent=2))
        return

    console.print()
    if slot.metadata:
        console.print(_metadata_table(f"Metadata: {slot.filename}", slot.metadata))
    else:
        console.print(f"[yellow]⚠ {escape(slot.filename)} has no metadata[/yellow]")
    console.print()


@cli.command(name="translate")
@click.argument('source_pdf', type=click.Path(exists=True, dir_okay=False))
@click.argument('target_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output', '-o',
    help='Output path (defaults to translated-metadata.<ext> in the current directory)',
    type=click.Path(dir_okay=False)
)
@click.option('--source-password', help='Password for an encrypted source PDF', type=str)
@click.option('--target-password', help='Password for an encrypted target PDF', type=str)
def translate_command(source_pdf, target_pdf, output, source_password, target_password):
    """
    Copy all metadata from SOURCE_PDF onto TARGET_PDF.

    Examples:

        pdfmetax translate source.pdf target.pdf

        pdfmetax translate source.pdf target.pdf -o out/result.pdf
    """
    options = TransferOptions(target_password=target_password)

    try:
        source = load_slot_from_path(source_pdf, password=source_password)
    except PDFMetaxException as e:
        _fail(f"Loading source {os.path.basename(source_pdf)} failed: {e}")

    try:
        target = load_slot_from_path(target_pdf, password=options.target_password)
    except PDFMetaxException as e:
        _fail(f"Loading target {os.path.basename(target_pdf)} failed: {e}")

    console.print()
    if source.metadata:
        console.print(_metadata_table(f"Source: {source.filename}", source.metadata))
    else:
        console.print(f"[bold yellow]⚠ Source {escape(source.filename)} has no metadata; target is left unchanged[/bold yellow]")

    console.print("\n[bold cyan]Translating metadata...[/bold cyan]")
    try:
        result = translate(source, target, options=options)
    except PDFMetaxException as e:
        _fail(f"Translate failed: {e}")

    try:
        destination = result.write(output or result.filename)
    except OSError as e:
        _fail(f"Writing {output or result.filename} failed: {e}")

    console.print()
    console.print(_metadata_table(f"Target: {target.filename} (updated)", result.metadata))
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {destination}")
    console.print(f"[dim]Output size: {format_file_size(len(result.data))}[/dim]")
    console.print()


if __name__ == '__main__':
    cli()
