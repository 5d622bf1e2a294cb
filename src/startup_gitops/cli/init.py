import functools
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import click

from .. import reporting, terminal
from ..exceptions import ConfigValidationError
from ..models.config import Application, EnvironmentName
from ..preflight import check_environment
from ..validation import save_config, validate, validate_partial
from .extraclick import config_path_option, environment_snapshot

# (key, prompt text, default)
Question = Tuple[str, str, Optional[str]]

PROJECT_QUESTIONS: Sequence[Question] = [
    ("name", "Project name (lowercase, hyphens allowed)", None),
    ("domain", "Primary domain (e.g. example.com)", None),
    ("email", "Admin email address", None),
    ("description", "Project description (optional)", ""),
]

CLUSTER_QUESTIONS: Sequence[Question] = [
    ("region", "DigitalOcean region", "nyc3"),
    ("nodeSize", "Kubernetes node size", "s-2vcpu-4gb"),
    ("nodeCount", "Number of nodes", "3"),
]


@click.group()
def common(**_):
    pass


@common.command(
    name="init",
    help="""
    Create a configuration file interactively.

    Every answer is checked as soon as its section is complete, so mistakes
    are reported before moving on.
    """,
)
@config_path_option
def init(config_path: str):
    terminal.header("GitOps initialization", "Interactive configuration")

    try:
        if Path(config_path).exists() and not _confirm(
            f"{config_path} already exists. Overwrite?", default=False
        ):
            terminal.error("Initialization aborted.")

        document = _prompt_for_config()
    except (KeyboardInterrupt, EOFError):
        terminal.error("\nInitialization aborted.")

    try:
        config = validate(document)
    except ConfigValidationError as e:
        reporting.report_validation_error(e)
        terminal.error("Initialization failed.")

    save_config(config, config_path)
    terminal.success(f"Configuration saved to {config_path}")

    # Reported only, `gitops preflight` enforces
    reporting.report_environment(check_environment(config, environment_snapshot()))

    terminal.warn("\nNext steps:")
    terminal.detail("  1. Review your configuration")
    terminal.detail(f"  2. Run: gitops preflight --config {config_path}")


def _prompt_for_config() -> Dict[str, Any]:
    project = _prompt_section("project", PROJECT_QUESTIONS)

    primary = _prompt_environment(project["domain"])
    environments = [primary]

    if primary["name"] == EnvironmentName.PRODUCTION.value:
        suggest_ha = primary["cluster"]["nodeCount"] >= 3
        if _confirm("Enable a high availability control plane?", default=suggest_ha):
            primary["cluster"]["haControlPlane"] = True

        if _confirm("Add a staging environment for testing?", default=True):
            environments.append(_staging_from(primary, project["domain"]))

    applications = _prompt_applications()
    features = {
        "email": _confirm("Enable email functionality (AWS SES integration)?", default=False),
        "monitoring": _confirm("Enable monitoring and observability?", default=True),
        "backup": _confirm("Enable automated backups?", default=True),
        "ssl": True,
    }

    return {
        "project": project,
        "environments": environments,
        "features": features,
        "applications": applications,
    }


def _prompt_section(section: str, questions: Sequence[Question]) -> Dict[str, Any]:
    """Ask `questions` until the section passes partial validation."""
    answers: Dict[str, Any] = {}
    pending = [key for key, _, _ in questions]

    while True:
        for key, text, default in questions:
            if key in pending:
                answers[key] = terminal.prompt(text=text, default=default)

        values = {k: v for k, v in answers.items() if v not in (None, "")}
        errors = _check({section: values})
        if not errors:
            return values

        prefix = f"{section}."
        pending = [e[len(prefix):].split(".")[0] for e in errors if e.startswith(prefix)]
        pending = pending or [key for key, _, _ in questions]


def _prompt_environment(domain: str) -> Dict[str, Any]:
    choices = [name.value for name in EnvironmentName]

    prompt_name = functools.partial(
        terminal.prompt, text=f"Primary environment ({'/'.join(choices)})", default="production"
    )
    while (name := prompt_name()) not in choices:
        terminal.warn("Environment must be one of: " + ", ".join(choices))

    while True:
        cluster = {
            key: terminal.prompt(text=text, default=default)
            for key, text, default in CLUSTER_QUESTIONS
        }
        cluster["nodeCount"] = _to_int(cluster["nodeCount"])

        environment = {"name": name, "cluster": cluster, "domain": domain}
        if not _check({"environments": [environment]}):
            return environment


def _staging_from(primary: Dict[str, Any], domain: str) -> Dict[str, Any]:
    cluster = primary["cluster"]
    return {
        "name": EnvironmentName.STAGING.value,
        "cluster": {
            "region": cluster["region"],
            "nodeSize": cluster["nodeSize"],
            "nodeCount": max(1, cluster["nodeCount"] - 1),
        },
        "domain": f"staging.{domain}",
    }


def _prompt_applications() -> List[str]:
    choices = [a.value for a in Application]

    while True:
        text = terminal.prompt(
            text=f"Applications to deploy, comma separated ({', '.join(choices)})",
            default="keycloak,mattermost",
        )
        applications = [a.strip() for a in (text or "").split(",") if a.strip()]
        if not _check({"applications": applications}):
            return applications


def _check(document: Dict[str, Any]) -> List[str]:
    """Partially validate `document`, print problems and return their paths."""
    try:
        validate_partial(document)
    except ConfigValidationError as e:
        for err in e.errors:
            terminal.warn(str(err))
        return e.paths

    return []


def _confirm(text: str, default: bool) -> bool:
    answer = terminal.prompt(text=f"{text} (y/n)", default="y" if default else "n")
    return str(answer).lower() in ["y", "yes"]


def _to_int(value: Any) -> Any:
    try:
        return int(value)
    except (TypeError, ValueError):
        return value
