from types import ModuleType

import click

from ..logging import setup_logging
from ..settings import settings
from . import config, env, init, preflight
from .extraclick import CLICK_CONTEXT_SETTINGS


@click.group(context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(package_name="startup-gitops")
def cli(verbose: bool):
    """Validate GitOps platform configuration and deployment credentials."""
    setup_logging("DEBUG" if verbose else settings.log_level)


def register(module: ModuleType) -> None:
    """
    Add a CLI module's commands.

    Commands in a module's "common" group become top-level commands, its
    "management" group is added as a subcommand group.
    """
    if hasattr(module, "common"):
        for command in module.common.commands.values():
            cli.add_command(command)
    if hasattr(module, "management"):
        cli.add_command(module.management)


register(config)
register(env)
register(init)
register(preflight)
