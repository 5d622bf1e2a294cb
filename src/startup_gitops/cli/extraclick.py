from pathlib import Path
from typing import Any, Dict, Optional

import click

from .. import reporting, terminal
from ..exceptions import ConfigFileError, ConfigValidationError
from ..models.config import Config
from ..preflight import load_environment
from ..settings import settings
from ..validation import load_config

CLICK_CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
)


def get_setting_callback(ctx: click.Context, param: click.Parameter, value: Any):
    return getattr(settings, param.name) if not value else value


config_path_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    required=False,
    callback=get_setting_callback,
    help="Path to the configuration file. Defaults to GITOPS_CONFIG_PATH or gitops.config.json.",
)


def load_config_or_exit(path: str) -> Config:
    """Load and validate a configuration file, exiting with a report on failure."""
    try:
        return load_config(path)
    except ConfigFileError as e:
        terminal.error(str(e))
    except ConfigValidationError as e:
        reporting.report_validation_error(e)
        terminal.error(f"Fix the errors above in {path} and try again.")


def load_optional_config(path: str) -> Optional[Config]:
    if not Path(path).exists():
        return None
    return load_config_or_exit(path)


def environment_snapshot() -> Dict[str, str]:
    """Process environment merged with the configured dotenv files."""
    return load_environment(settings.env_files)
