"""
Validation result models

Conflicting invocation modes are reported as results rather than raised, so
the orchestrator can map them to an exit code without running any job.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any


class ValidationErrorCode(Enum):
    """Kinds of rejected invocations."""
    MODE_CONFLICT = "mode_conflict"
    GROUP_TYPE_CONFLICT = "group_type_conflict"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation check."""

    is_valid: bool
    error_code: Optional[ValidationErrorCode] = None
    message: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error_code: ValidationErrorCode, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_code=error_code, message=message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "error_code": self.error_code.value if self.error_code else None,
            "message": self.message
        }
