"""Validation error values returned by the OMI validator."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kind of OMI configuration failure. Every kind blocks the build."""

    MISSING_FIELD = "MISSING_FIELD"
    REGION_MISMATCH = "REGION_MISMATCH"
    INVALID_KMS_KEY = "INVALID_KMS_KEY"
    DISALLOWED_COMBINATION = "DISALLOWED_COMBINATION"
    NAME_LENGTH = "NAME_LENGTH"
    NAME_CHARACTERS = "NAME_CHARACTERS"
    INVALID_REGION = "INVALID_REGION"


@dataclass(frozen=True)
class OMIValidationError:
    """A single human-readable validation failure."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message
