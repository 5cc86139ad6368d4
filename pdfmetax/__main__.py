from pdfmetax.cli import cli

cli()
