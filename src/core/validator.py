"""Validation framework shared by configuration validators.

This module provides the result types and the base class that every
validator implements, so results can be reported the same way whatever
was checked.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationStatus(Enum):
    """Validation result status."""

    PASSED = "PASSED"
    FAILED = "FAILED"


@dataclass
class ValidationResult:
    """Result of a validation check."""

    validator_name: str
    status: ValidationStatus
    message: str
    errors: Optional[List[Any]] = None
    remediation_steps: Optional[List[str]] = None
    details: Optional[Dict[str, Any]] = None


class BaseValidator(ABC):
    """Base class for all validators."""

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Perform validation check.

        Returns:
            ValidationResult with status and details
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get validator name."""
        pass
