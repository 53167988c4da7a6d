"""OMI name character rules."""

import re


ALLOWED_NAME_CHARACTERS = (
    "alphanumeric characters, parentheses (()), square brackets ([]), spaces "
    "( ), periods (.), slashes (/), dashes (-), single quotes ('), at-signs "
    "(@), or underscores(_)"
)

CLEAN_NAME_PATTERN = re.compile(r"[a-zA-Z0-9()\[\] ./\-'@_]*")
DISALLOWED_NAME_CHARACTERS = re.compile(r"[^a-zA-Z0-9()\[\] ./\-'@_]")


def is_clean_name(name: str) -> bool:
    """Return True if every character of the name is allowed in an OMI name."""
    return CLEAN_NAME_PATTERN.fullmatch(name) is not None


def clean_omi_name(name: str) -> str:
    """Strip the characters an OMI name may not contain.

    Args:
        name: Candidate OMI name

    Returns:
        The name with every disallowed character removed
    """
    return DISALLOWED_NAME_CHARACTERS.sub("", name)
