from .exceptions import (
    ConfigValidationError,
    FieldError,
    InvariantError,
    MissingCredentialError,
    ShapeError,
)
from .models import Config, EnvironmentValidationResult, PartialConfig
from .preflight import check_environment, raise_for_environment
from .validation import validate, validate_partial

__all__ = [
    "Config",
    "PartialConfig",
    "EnvironmentValidationResult",
    "ConfigValidationError",
    "FieldError",
    "ShapeError",
    "InvariantError",
    "MissingCredentialError",
    "validate",
    "validate_partial",
    "check_environment",
    "raise_for_environment",
]
