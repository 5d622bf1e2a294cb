from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str
    kind: str = "shape"  # shape or invariant

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class ConfigValidationError(ValueError):
    def __init__(self, errors: Sequence[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.errors]


class ShapeError(ConfigValidationError):
    """A field failed its own type, pattern or range constraint."""


class InvariantError(ConfigValidationError):
    """A rule spanning several fields failed on an otherwise valid object."""


class MissingCredentialError(RuntimeError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")


class ConfigFileError(RuntimeError):
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
