from resname.cli import cli

cli()
