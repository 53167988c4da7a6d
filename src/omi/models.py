"""Configuration records consumed by the OMI validator.

This module defines the mutable OMI configuration record and the read-only
access context, together with decoding from the user-facing mapping keys.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


class OMIConfigError(Exception):
    """Raised when a mapping cannot be decoded into an OMI configuration."""

    pass


# attribute name -> user-facing key
FIELD_KEYS = {
    "name": "omi_name",
    "description": "omi_description",
    "virtualization_type": "omi_virtualization_type",
    "users": "omi_users",
    "groups": "omi_groups",
    "product_codes": "omi_product_codes",
    "regions": "omi_regions",
    "skip_region_validation": "skip_region_validation",
    "tags": "tags",
    "ena_support": "ena_support",
    "sriov_support": "sriov_support",
    "force_deregister": "force_deregister",
    "force_delete_snapshot": "force_delete_snapshot",
    "encrypt_boot": "encrypt_boot",
    "kms_key_id": "kms_key_id",
    "region_kms_key_ids": "region_kms_key_ids",
    "snapshot_tags": "snapshot_tags",
    "snapshot_users": "snapshot_users",
    "snapshot_groups": "snapshot_groups",
}


@dataclass
class OMIConfig:
    """Common configuration related to creating OMIs."""

    name: str = ""
    description: str = ""
    virtualization_type: str = ""
    users: List[str] = field(default_factory=list)
    groups: List[str] = field(default_factory=list)
    product_codes: List[str] = field(default_factory=list)
    regions: List[str] = field(default_factory=list)
    skip_region_validation: bool = False
    tags: Dict[str, str] = field(default_factory=dict)
    ena_support: Optional[bool] = None
    sriov_support: bool = False
    force_deregister: bool = False
    force_delete_snapshot: bool = False
    encrypt_boot: bool = False
    kms_key_id: str = ""
    region_kms_key_ids: Dict[str, str] = field(default_factory=dict)
    snapshot_tags: Dict[str, str] = field(default_factory=dict)
    snapshot_users: List[str] = field(default_factory=list)
    snapshot_groups: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OMIConfig":
        """Build a configuration record from user-facing keys.

        Args:
            data: Mapping keyed by the user-facing names (e.g. 'omi_name')

        Returns:
            Populated OMIConfig

        Raises:
            OMIConfigError: On unknown keys or values of the wrong type
        """
        if not isinstance(data, dict):
            raise OMIConfigError("OMI configuration must be a mapping")

        attributes = {key: attr for attr, key in FIELD_KEYS.items()}
        unknown = sorted(set(data) - set(attributes))
        if unknown:
            raise OMIConfigError(
                f"Unknown OMI configuration keys: {', '.join(unknown)}"
            )

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            attr = attributes[key]
            kwargs[attr] = _coerce(key, value, cls.__dataclass_fields__[attr].default)

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Export the record using the user-facing keys.

        Returns:
            Configuration dictionary
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (list, dict)):
                value = value.copy()
            result[FIELD_KEYS[f.name]] = value
        return result


@dataclass(frozen=True)
class AccessConfig:
    """Access context of a build: where the OMI is originally created."""

    raw_region: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AccessConfig":
        """Build an access context from a mapping with an optional 'region'."""
        region = (data or {}).get("region")
        if region is not None and not isinstance(region, str):
            raise OMIConfigError("Field 'region' must be a string")
        return cls(raw_region=region or None)


def _coerce(key: str, value: Any, default: Any) -> Any:
    """Check a decoded value against the shape of its field default."""
    if key in ("omi_regions", "omi_users", "omi_groups", "omi_product_codes",
               "snapshot_users", "snapshot_groups"):
        if not isinstance(value, list):
            raise OMIConfigError(f"Field '{key}' must be a list")
        if any(item is None for item in value):
            raise OMIConfigError(f"Field '{key}' must not contain empty entries")
        return [str(item) for item in value]

    if key in ("tags", "snapshot_tags", "region_kms_key_ids"):
        if not isinstance(value, dict):
            raise OMIConfigError(f"Field '{key}' must be a mapping")
        return {str(k): "" if v is None else str(v) for k, v in value.items()}

    if key == "ena_support" or isinstance(default, bool):
        if not isinstance(value, bool):
            raise OMIConfigError(f"Field '{key}' must be a boolean")
        return value

    if not isinstance(value, str):
        raise OMIConfigError(f"Field '{key}' must be a string")
    return value
