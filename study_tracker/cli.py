import logging
import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from study_tracker.context import StudyContext
from study_tracker.session.commands import session, start


def make_default_map(settings: dict) -> dict:
    # `start` is reachable both at the top level and under the `session` group
    default_map = dict(settings)
    default_map.setdefault('session', {'start': settings.get('start') or {}})
    return default_map


@click.group(invoke_without_command=True)
@click.option('--config', default='config.yaml', type=click.Path())
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def entry_point(ctx, config, verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    settings = {}
    if os.path.exists(config):
        with open(config, 'r', encoding='utf-8') as f:
            settings = load(f.read(), Loader=Loader) or {}
        logging.getLogger(__name__).debug(f'configuration loaded from {config}')
        ctx.default_map = make_default_map(settings)
    ctx.obj = StudyContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.invoke(start)


entry_point.add_command(session)
entry_point.add_command(start)


if __name__ == '__main__':
    entry_point()
