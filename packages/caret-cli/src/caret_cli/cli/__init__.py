import click
from caret_cli.render import render, show


@click.group()
def cli():
    """Render diagnostic reports with source context."""
    pass


# add commands here

cli.add_command(render)
cli.add_command(show)
