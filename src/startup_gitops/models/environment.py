"""Result of inspecting the process environment before a deployment."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class EnvironmentValidationResult:
    """
    Outcome of a preflight check.

    `missing` holds variable names in the order they were examined,
    `warnings` holds free-text format problems. Only missing variables
    make the result invalid.
    """

    missing: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.missing

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "missing": list(self.missing),
            "warnings": list(self.warnings),
        }
