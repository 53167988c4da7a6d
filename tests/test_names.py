"""Unit tests for OMI name rules."""

from src.omi.names import clean_omi_name, is_clean_name


class TestNameRules:
    """Test cases for is_clean_name and clean_omi_name."""

    def test_allowed_characters(self):
        """Test names made only of allowed characters."""
        assert is_clean_name("My AMI (v1) [test]")
        assert is_clean_name("team/app-1.0_'final'@2024")

    def test_disallowed_characters(self):
        """Test names containing disallowed characters."""
        assert not is_clean_name("bad#name")
        assert not is_clean_name("tab\tname")
        assert not is_clean_name("café")

    def test_empty_name_is_clean(self):
        """Test that the empty name has nothing to clean."""
        assert is_clean_name("")
        assert clean_omi_name("") == ""

    def test_clean_strips_disallowed(self):
        """Test that cleaning removes disallowed characters only."""
        assert clean_omi_name("bad#name!") == "badname"
        assert clean_omi_name("My AMI (v1) [test]") == "My AMI (v1) [test]"

    def test_clean_agrees_with_check(self):
        """Test that a name is clean exactly when cleaning leaves it unchanged."""
        for name in ["ok-name", "bad*name", "a:b", "x y z"]:
            assert is_clean_name(name) == (clean_omi_name(name) == name)
