"""Unit tests for OMI configuration records."""

import pytest

from src.omi.models import AccessConfig, OMIConfig, OMIConfigError


class TestOMIConfig:
    """Test cases for OMIConfig decoding."""

    def test_from_dict_full(self):
        """Test decoding every user-facing key."""
        config = OMIConfig.from_dict({
            "omi_name": "my-image",
            "omi_description": "test image",
            "omi_virtualization_type": "hvm",
            "omi_users": ["123456789012"],
            "omi_groups": ["all"],
            "omi_product_codes": ["abc"],
            "omi_regions": ["eu-west-2", "us-east-2"],
            "skip_region_validation": True,
            "tags": {"Name": "image"},
            "ena_support": True,
            "sriov_support": True,
            "force_deregister": True,
            "force_delete_snapshot": True,
            "encrypt_boot": True,
            "kms_key_id": "alias/my-key",
            "region_kms_key_ids": {"us-east-2": "alias/other"},
            "snapshot_tags": {"Owner": "ops"},
            "snapshot_users": ["210987654321"],
            "snapshot_groups": ["all"],
        })

        assert config.name == "my-image"
        assert config.regions == ["eu-west-2", "us-east-2"]
        assert config.skip_region_validation is True
        assert config.ena_support is True
        assert config.region_kms_key_ids == {"us-east-2": "alias/other"}
        assert config.snapshot_users == ["210987654321"]

    def test_defaults(self):
        """Test that omitted and null keys fall back to defaults."""
        config = OMIConfig.from_dict({"omi_name": "abc", "omi_regions": None})

        assert config.regions == []
        assert config.region_kms_key_ids == {}
        assert config.ena_support is None
        assert config.encrypt_boot is False
        assert config.kms_key_id == ""

    def test_null_region_key_becomes_empty(self):
        """Test that a region listed without a key maps to an empty key."""
        config = OMIConfig.from_dict({"region_kms_key_ids": {"us-east-2": None}})

        assert config.region_kms_key_ids == {"us-east-2": ""}

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(OMIConfigError) as exc_info:
            OMIConfig.from_dict({"omi_name": "abc", "ami_name": "abc"})

        assert "Unknown OMI configuration keys: ami_name" in str(exc_info.value)

    @pytest.mark.parametrize("data, message", [
        ({"omi_regions": "eu-west-2"}, "'omi_regions' must be a list"),
        ({"omi_regions": ["eu-west-2", None]}, "'omi_regions' must not contain empty entries"),
        ({"snapshot_users": [None]}, "'snapshot_users' must not contain empty entries"),
        ({"region_kms_key_ids": ["eu-west-2"]}, "'region_kms_key_ids' must be a mapping"),
        ({"encrypt_boot": "yes"}, "'encrypt_boot' must be a boolean"),
        ({"omi_name": 42}, "'omi_name' must be a string"),
    ])
    def test_wrong_types(self, data, message):
        """Test that values of the wrong type are rejected."""
        with pytest.raises(OMIConfigError) as exc_info:
            OMIConfig.from_dict(data)

        assert message in str(exc_info.value)

    def test_not_a_mapping(self):
        """Test that a non-mapping section is rejected."""
        with pytest.raises(OMIConfigError):
            OMIConfig.from_dict(["omi_name"])

    def test_to_dict(self):
        """Test exporting with user-facing keys."""
        config = OMIConfig(name="abc", regions=["a"])
        data = config.to_dict()

        assert data["omi_name"] == "abc"
        assert data["omi_regions"] == ["a"]
        data["omi_regions"].append("b")
        assert config.regions == ["a"]
        assert OMIConfig.from_dict(data).name == "abc"


class TestAccessConfig:
    """Test cases for AccessConfig."""

    def test_from_dict(self):
        """Test reading the origin region."""
        assert AccessConfig.from_dict({"region": "eu-west-2"}).raw_region == "eu-west-2"

    def test_absent_region(self):
        """Test that a missing or empty region means no origin region."""
        assert AccessConfig.from_dict(None).raw_region is None
        assert AccessConfig.from_dict({"region": ""}).raw_region is None

    def test_invalid_region_type(self):
        """Test that a non-string region is rejected."""
        with pytest.raises(OMIConfigError):
            AccessConfig.from_dict({"region": ["eu-west-2"]})
