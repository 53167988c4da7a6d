"""OMI configuration validation.

This module runs the fixed set of OMI configuration rules: required name,
region and KMS key map consistency, sharing and encryption combinations,
KMS key shapes, and name length and character rules. Every rule runs and
every failure is collected; nothing is raised for an invalid configuration.
"""

import logging
from typing import List, Optional, Sequence

from core.validator import BaseValidator, ValidationResult, ValidationStatus

from .errors import ErrorKind, OMIValidationError
from .kms import is_valid_kms_key
from .models import AccessConfig, OMIConfig
from .names import ALLOWED_NAME_CHARACTERS, clean_omi_name
from .regions import find_unknown_regions, reconcile_regions


logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 128


def validate(
    config: OMIConfig,
    access_config: Optional[AccessConfig] = None,
    known_regions: Optional[Sequence[str]] = None,
) -> List[OMIValidationError]:
    """Validate an OMI configuration and normalize its copy regions.

    ``config.regions`` is replaced by the deduplicated region list with the
    origin region removed.

    Args:
        config: OMI configuration record, modified in place
        access_config: Access context carrying the origin region
        known_regions: Region names accepted as copy targets; None disables
                       the region name check

    Returns:
        Validation errors in rule order (empty if the configuration is valid)
    """
    errors: List[OMIValidationError] = []

    if not config.name:
        errors.append(OMIValidationError(
            ErrorKind.MISSING_FIELD, "omi_name must be specified"
        ))

    # Keys of region_kms_key_ids must be copy targets too
    for kms_key_region in config.region_kms_key_ids:
        if kms_key_region not in config.regions:
            errors.append(OMIValidationError(
                ErrorKind.REGION_MISMATCH,
                f"Region {kms_key_region} is in region_kms_key_ids but not in omi_regions",
            ))

    if config.regions:
        origin_region = access_config.raw_region if access_config else None
        regions, region_errors = reconcile_regions(
            config.regions, config.region_kms_key_ids, origin_region
        )
        errors.extend(region_errors)
        config.regions = regions

    if config.users and config.encrypt_boot:
        errors.append(OMIValidationError(
            ErrorKind.DISALLOWED_COMBINATION,
            "Cannot share OMI with encrypted boot volume",
        ))

    # An empty per-region key falls back to the default key
    kms_keys = []
    if config.kms_key_id:
        kms_keys.append(config.kms_key_id)
    for kms_key in config.region_kms_key_ids.values():
        if not kms_key:
            kms_keys.append(config.kms_key_id)
    for kms_key in kms_keys:
        if not is_valid_kms_key(kms_key):
            errors.append(OMIValidationError(
                ErrorKind.INVALID_KMS_KEY, f"{kms_key} is not a valid KMS Key Id."
            ))

    if config.snapshot_users:
        if not config.kms_key_id and config.encrypt_boot:
            errors.append(OMIValidationError(
                ErrorKind.DISALLOWED_COMBINATION,
                "Cannot share snapshot encrypted with default KMS key",
            ))
        for kms_key in config.region_kms_key_ids.values():
            if not kms_key:
                errors.append(OMIValidationError(
                    ErrorKind.DISALLOWED_COMBINATION,
                    "Cannot share snapshot encrypted with default KMS key",
                ))

    # Length is measured in UTF-8 bytes
    name_length = len(config.name.encode("utf-8"))
    if name_length < MIN_NAME_LENGTH or name_length > MAX_NAME_LENGTH:
        errors.append(OMIValidationError(
            ErrorKind.NAME_LENGTH,
            f"omi_name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters long",
        ))

    if config.name != clean_omi_name(config.name):
        errors.append(OMIValidationError(
            ErrorKind.NAME_CHARACTERS,
            f"OMIName should only contain {ALLOWED_NAME_CHARACTERS}. "
            "You can use the `clean_omi_name` template filter to "
            "automatically clean your omi name.",
        ))

    if known_regions is not None and not config.skip_region_validation:
        candidates = list(config.regions)
        if access_config and access_config.raw_region:
            candidates.append(access_config.raw_region)
        for region in find_unknown_regions(candidates, known_regions):
            errors.append(OMIValidationError(
                ErrorKind.INVALID_REGION, f"Invalid region: {region}"
            ))

    logger.debug(f"OMI configuration validation finished with {len(errors)} error(s)")
    return errors


class OMIConfigValidator(BaseValidator):
    """Validates an OMI configuration and reports remediation steps."""

    REMEDIATION = {
        ErrorKind.MISSING_FIELD: "Set 'omi_name' in the OMI configuration",
        ErrorKind.REGION_MISMATCH: (
            "List the same regions in 'omi_regions' and 'region_kms_key_ids' "
            "(including the build region when it is listed)"
        ),
        ErrorKind.INVALID_KMS_KEY: (
            "Use a key id, 'alias/<name>', or a full 'arn:aws:kms:' key or alias ARN"
        ),
        ErrorKind.DISALLOWED_COMBINATION: (
            "Set an explicit 'kms_key_id' (and per-region keys) before sharing, "
            "or disable 'encrypt_boot'"
        ),
        ErrorKind.NAME_LENGTH: (
            f"Use an 'omi_name' between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters"
        ),
        ErrorKind.INVALID_REGION: (
            "Check region names, or set 'skip_region_validation' for regions "
            "not yet listed"
        ),
    }

    def __init__(
        self,
        config: OMIConfig,
        access_config: Optional[AccessConfig] = None,
        known_regions: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize validator.

        Args:
            config: OMI configuration record, modified in place by validate()
            access_config: Access context carrying the origin region
            known_regions: Region names accepted as copy targets
        """
        self.config = config
        self.access_config = access_config
        self.known_regions = known_regions

    @property
    def name(self) -> str:
        """Validator name."""
        return "OMI Configuration"

    def validate(self) -> ValidationResult:
        """Validate the OMI configuration.

        Returns:
            ValidationResult with collected errors and remediation steps
        """
        errors = validate(self.config, self.access_config, self.known_regions)
        details = {
            "omi_name": self.config.name,
            "regions": list(self.config.regions),
        }

        if not errors:
            return ValidationResult(
                validator_name=self.name,
                status=ValidationStatus.PASSED,
                message="OMI configuration is valid",
                errors=[],
                details=details,
            )

        details["errors"] = [str(error) for error in errors]
        return ValidationResult(
            validator_name=self.name,
            status=ValidationStatus.FAILED,
            message=f"OMI configuration has {len(errors)} error(s)",
            errors=errors,
            remediation_steps=self._get_remediation_steps(errors),
            details=details,
        )

    def _get_remediation_steps(self, errors: List[OMIValidationError]) -> List[str]:
        """Get remediation steps for the kinds of errors found."""
        steps = []
        for error in errors:
            if error.kind == ErrorKind.NAME_CHARACTERS:
                step = f"Rename the OMI, e.g. '{clean_omi_name(self.config.name)}'"
            else:
                step = self.REMEDIATION[error.kind]
            if step not in steps:
                steps.append(step)
        return steps
