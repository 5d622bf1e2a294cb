"""Domain models for startup-gitops configuration."""

from .config import (
    Application,
    Cluster,
    Config,
    Environment,
    EnvironmentName,
    Features,
    PartialConfig,
    Project,
)
from .environment import EnvironmentValidationResult

__all__ = [
    "Application",
    "Cluster",
    "Config",
    "Environment",
    "EnvironmentName",
    "Features",
    "PartialConfig",
    "Project",
    "EnvironmentValidationResult",
]
