from pathlib import Path

import click

from .. import reporting, terminal
from ..validation import save_config, validate
from .extraclick import config_path_option, load_config_or_exit

EXAMPLE_CONFIG = {
    "project": {
        "name": "my-gitops-project",
        "domain": "example.com",
        "email": "admin@example.com",
    },
    "environments": [
        {
            "name": "production",
            "cluster": {
                "region": "nyc3",
                "nodeSize": "s-2vcpu-4gb",
                "nodeCount": 3,
            },
            "domain": "example.com",
        }
    ],
    "features": {
        "email": False,
        "monitoring": True,
        "backup": True,
        "ssl": True,
    },
    "applications": ["keycloak", "mattermost"],
}


@click.group(
    name="config",
    help="Manage the configuration file.",
)
def management():
    pass


@management.command(
    name="validate",
    help="Validate a configuration file.",
)
@config_path_option
def validate_config(config_path: str):
    config = load_config_or_exit(config_path)

    terminal.success("Configuration is valid!")
    reporting.report_config_summary(config)


@management.command(
    name="init",
    help="Write an example configuration file.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default="gitops.config.json",
    help="Output file path.",
)
def init_config(output: str):
    if Path(output).exists():
        terminal.warn(f"Configuration file already exists: {output}")
        return

    save_config(validate(EXAMPLE_CONFIG), output)

    terminal.success(f"Example configuration created: {output}")
    terminal.warn("\nNext steps:")
    terminal.detail("  1. Edit the configuration file with your values")
    terminal.detail(f"  2. Run: gitops config validate --config {output}")
    terminal.detail(f"  3. Run: gitops preflight --config {output}")
