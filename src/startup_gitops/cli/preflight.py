import click

from .. import reporting, terminal
from ..exceptions import MissingCredentialError
from ..preflight import check_environment, raise_for_environment
from .extraclick import config_path_option, environment_snapshot, load_config_or_exit


@click.group()
def common(**_):
    pass


@common.command(
    name="preflight",
    help="""
    Validate the configuration and the environment before deploying.

    Stops with a non-zero exit status when the configuration is invalid or a
    required credential is missing. Credential format problems are reported
    as warnings only.
    """,
)
@config_path_option
def preflight(config_path: str):
    terminal.header("Validating configuration", config_path)
    config = load_config_or_exit(config_path)

    terminal.header("Checking environment")
    result = check_environment(config, environment_snapshot())
    for warning in result.warnings:
        terminal.warn(f"Warning: {warning}")

    try:
        raise_for_environment(result)
    except MissingCredentialError as e:
        terminal.error(str(e))

    terminal.success("Preflight checks passed.")
    reporting.report_config_summary(config)
