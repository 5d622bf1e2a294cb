"""Operator-facing reports for validation and preflight failures."""

from rich.table import Column, Table, box

from . import terminal
from .exceptions import ConfigValidationError, InvariantError
from .models.config import Config
from .models.environment import EnvironmentValidationResult

# (variable, example value, note)
ENVIRONMENT_EXAMPLES = [
    ("DIGITALOCEAN_TOKEN", "dop_v1_your_token_here", ""),
    ("AWS_ACCESS_KEY_ID", "your_aws_access_key", "(if email features enabled)"),
    ("AWS_SECRET_ACCESS_KEY", "your_aws_secret_key", "(if email features enabled)"),
]


def display_environment_help() -> None:
    terminal.warn("\nEnvironment variable setup:")
    terminal.detail("  Create a .env file in your project root with:")
    for name, example, note in ENVIRONMENT_EXAMPLES:
        line = f"  {name}={example}"
        terminal.detail(f"{line}  # {note}" if note else line)

    terminal.detail("\n  Or set them in your shell environment:")
    name, example, _ = ENVIRONMENT_EXAMPLES[0]
    terminal.detail(f"  export {name}={example}")


def report_missing_environment(result: EnvironmentValidationResult) -> None:
    terminal.error("Missing required environment variables:", exit=False)
    for name in result.missing:
        terminal.error(f"  • {name}", exit=False)

    display_environment_help()


def report_environment(result: EnvironmentValidationResult) -> None:
    """Print format warnings and, when invalid, the missing variables."""
    for warning in result.warnings:
        terminal.warn(f"Warning: {warning}")

    if result.valid:
        terminal.success("Environment is ready for deployment.")
    else:
        report_missing_environment(result)


def report_validation_error(error: ConfigValidationError) -> None:
    if isinstance(error, InvariantError):
        terminal.error("Configuration violates cluster sizing rules:", exit=False)
    else:
        terminal.error("Configuration validation failed:", exit=False)

    table = Table(
        Column("Field"),
        Column("Problem"),
        Column("Kind"),
        box=box.SIMPLE,
    )
    for err in error.errors:
        table.add_row(err.path or "<root>", err.message, err.kind)

    terminal.print(table)


def report_config_summary(config: Config) -> None:
    terminal.header("Configuration summary")
    terminal.detail(f"  Project: {config.project.name}")
    terminal.detail(f"  Domain: {config.project.domain}")

    n, s = terminal.pluralize(config.environments)
    names = ", ".join(env.name.value for env in config.environments)
    terminal.detail(f"  Environments: {n} environment{s} ({names})")

    applications = sorted(a.value for a in config.applications)
    terminal.detail(f"  Applications: {', '.join(applications) or 'none'}")
    terminal.detail(f"  Features: {', '.join(config.features.enabled()) or 'none'}")
