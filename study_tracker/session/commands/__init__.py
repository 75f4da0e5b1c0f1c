import click
from .start import start


@click.group()
def session():
    pass


session.add_command(start)
