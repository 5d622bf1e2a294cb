import sys

import click

from .. import reporting, terminal
from ..preflight import check_environment
from .extraclick import config_path_option, environment_snapshot, load_optional_config


@click.group(
    name="env",
    help="Inspect deployment credentials.",
)
def management():
    pass


@management.command(
    name="check",
    help="""
    Check that the environment holds every credential the configuration needs.

    Variables are read from the shell and from .env.local and .env files. Without
    a configuration file only the unconditional variables are checked.
    """,
)
@config_path_option
@click.option(
    "--format",
    type=click.Choice(("table", "json")),
    default="table",
    show_default=True,
    help="Change the format of the output.",
)
def check(config_path: str, format: str):
    config = load_optional_config(config_path)
    if config is None and format == "table":
        terminal.detail(f"No configuration at {config_path}, checking base variables only.")

    result = check_environment(config, environment_snapshot())

    if format == "json":
        terminal.print_json(result.to_dict())
    else:
        reporting.report_environment(result)

    if not result.valid:
        sys.exit(1)
