"""Validation entry points for configuration documents."""

import json
from pathlib import Path
from typing import Any, List, Type, TypeVar, Union

import pydantic
import structlog

from .exceptions import (
    ConfigFileError,
    FieldError,
    InvariantError,
    ShapeError,
)
from .models.config import NODE_BOUNDS_ERROR_TYPE, Config, GitOpsModel, PartialConfig

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=GitOpsModel)


def validate(candidate: Any) -> Config:
    """
    Validate a complete configuration document.

    Args:
        candidate: Deserialized document (usually a dict) or a Config

    Returns:
        Frozen Config with defaults applied

    Raises:
        ShapeError: If any field fails its own constraint
        InvariantError: If fields are valid but node-count bounds are not
    """
    return _validate(Config, candidate)


def validate_partial(candidate: Any) -> PartialConfig:
    """
    Validate a configuration document that may be incomplete.

    Absent sections are not errors. Sections that are present must be
    valid, node-count bounds included.
    """
    return _validate(PartialConfig, candidate)


def _validate(model: Type[ModelT], candidate: Any) -> ModelT:
    try:
        result = model.model_validate(candidate)
    except pydantic.ValidationError as e:
        errors = _field_errors(e)
        logger.debug(
            "Configuration rejected",
            model=model.__name__,
            errors=[str(err) for err in errors],
        )
        if any(err.kind == "shape" for err in errors):
            raise ShapeError(errors) from e
        raise InvariantError(errors) from e

    logger.debug("Configuration validated", model=model.__name__)
    return result


def _field_errors(exc: pydantic.ValidationError) -> List[FieldError]:
    errors = []
    for err in exc.errors(include_url=False):
        message = err["msg"]
        ctx = err.get("ctx") or {}
        if err["type"] == "value_error" and "error" in ctx:
            # Drop pydantic's "Value error, " prefix
            message = str(ctx["error"])

        errors.append(
            FieldError(
                path=".".join(str(part) for part in err["loc"]),
                message=message,
                kind="invariant" if err["type"] == NODE_BOUNDS_ERROR_TYPE else "shape",
            )
        )
    return errors


def read_document(path: Union[str, Path]) -> Any:
    """
    Read a JSON configuration document.

    Raises:
        ConfigFileError: If the file cannot be read, is not UTF-8 or is not valid JSON
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigFileError(str(path), "Configuration file not found")
    except UnicodeDecodeError as e:
        raise ConfigFileError(str(path), f"Configuration file is not valid UTF-8 (byte {e.start})")
    except OSError as e:
        raise ConfigFileError(str(path), f"Cannot read configuration file ({e.strerror or e})")

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigFileError(str(path), f"Invalid JSON ({e.msg} at line {e.lineno})")


def load_config(path: Union[str, Path]) -> Config:
    """Read and validate a complete configuration file."""
    return validate(read_document(path))


def load_partial_config(path: Union[str, Path]) -> PartialConfig:
    """Read and validate a configuration file that may be incomplete."""
    return validate_partial(read_document(path))


def dump_config(config: GitOpsModel) -> str:
    """Serialize a configuration to JSON using camelCase keys."""
    return json.dumps(config.to_document(), indent=2) + "\n"


def save_config(config: GitOpsModel, path: Union[str, Path]) -> None:
    Path(path).write_text(dump_config(config), encoding="utf-8")
    logger.info("Configuration saved", path=str(path))
