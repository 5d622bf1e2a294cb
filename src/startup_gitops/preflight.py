"""Preflight inspection of the process environment."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Union

import structlog
from dotenv import dotenv_values

from . import reporting
from .exceptions import MissingCredentialError
from .models.config import Config, PartialConfig
from .models.environment import EnvironmentValidationResult

logger = structlog.get_logger(__name__)

# Needed for every deployment
REQUIRED_ENV_VARS = ("DIGITALOCEAN_TOKEN",)

# Needed only when the feature is enabled
CONDITIONAL_ENV_VARS: Dict[str, Sequence[str]] = {
    "email": ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"),
}


@dataclass(frozen=True)
class FormatRule:
    """Expected shape of a variable's value."""

    pattern: Pattern
    warning: str
    example: str


FORMAT_RULES: Dict[str, FormatRule] = {
    "DIGITALOCEAN_TOKEN": FormatRule(
        pattern=re.compile(r"dop_v1_[a-f0-9]{64}"),
        warning="DigitalOcean token format appears invalid (expected: dop_v1_...)",
        example="dop_v1_your_token_here",
    ),
    "AWS_ACCESS_KEY_ID": FormatRule(
        pattern=re.compile(r"(AKIA|ASIA)[A-Z0-9]{16}"),
        warning="AWS access key ID format appears invalid (expected: AKIA...)",
        example="your_aws_access_key",
    ),
}

ConfigLike = Union[Config, PartialConfig, None]


def required_variables(config: ConfigLike = None) -> List[str]:
    """
    List the variables a deployment of `config` needs.

    Unconditional variables come first, followed by the variables of each
    enabled feature in table order.
    """
    names = list(REQUIRED_ENV_VARS)

    features = config.features if config is not None else None
    if features is None:
        return names

    for feature, variables in CONDITIONAL_ENV_VARS.items():
        if getattr(features, feature, False):
            names.extend(v for v in variables if v not in names)

    return names


def check_environment(
    config: ConfigLike = None, environ: Optional[Mapping[str, str]] = None
) -> EnvironmentValidationResult:
    """
    Check whether the environment can support deploying `config`.

    Read-only and never raises; call raise_for_environment() to abort on
    an invalid result.

    Args:
        config: Validated configuration. Without one only the
                unconditional variables are checked.
        environ: Variables to inspect. Defaults to os.environ.

    Returns:
        EnvironmentValidationResult with missing names and format warnings
    """
    if environ is None:
        environ = os.environ

    missing: List[str] = []
    warnings: List[str] = []

    for name in required_variables(config):
        value = environ.get(name)
        if value is None or value.strip() == "":
            missing.append(name)
            continue

        rule = FORMAT_RULES.get(name)
        if rule is not None and not rule.pattern.fullmatch(value):
            warnings.append(rule.warning)

    result = EnvironmentValidationResult(missing=missing, warnings=warnings)
    logger.debug(
        "Environment preflight completed",
        valid=result.valid,
        missing=result.missing,
        warnings=len(result.warnings),
    )
    return result


def raise_for_environment(result: EnvironmentValidationResult) -> None:
    """
    Abort the calling workflow when `result` is invalid.

    Prints the missing variables and setup help before raising.

    Raises:
        MissingCredentialError: If any required variable is missing
    """
    if result.valid:
        return

    reporting.report_missing_environment(result)
    raise MissingCredentialError(result.missing)


def load_environment(
    env_files: Sequence[Union[str, Path]], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Build a snapshot of the environment including dotenv files.

    The first file defining a variable wins and real environment variables
    win over every file. Nothing is written back to os.environ.
    """
    snapshot: Dict[str, str] = {}

    for path in env_files:
        if not Path(path).is_file():
            continue

        for key, value in dotenv_values(path).items():
            if value is not None:
                snapshot.setdefault(key, value)
        logger.debug("Loaded dotenv file", path=str(path))

    snapshot.update(os.environ if environ is None else environ)
    return snapshot
