"""OMI configuration validation.

This package contains the OMI configuration record, the KMS key and name
recognizers, copy region reconciliation, and the validator that combines
them into the full rule set.
"""

from .errors import ErrorKind, OMIValidationError
from .kms import is_valid_kms_key
from .models import AccessConfig, OMIConfig, OMIConfigError
from .names import clean_omi_name, is_clean_name
from .regions import reconcile_regions
from .validator import OMIConfigValidator, ValidationResult, ValidationStatus, validate

__all__ = [
    'AccessConfig',
    'ErrorKind',
    'OMIConfig',
    'OMIConfigError',
    'OMIConfigValidator',
    'OMIValidationError',
    'ValidationResult',
    'ValidationStatus',
    'clean_omi_name',
    'is_clean_name',
    'is_valid_kms_key',
    'reconcile_regions',
    'validate',
]
