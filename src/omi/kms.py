"""KMS key identifier recognition.

A KMS key may be given as a bare key id, an alias, or a full ARN naming
either of them. Every pattern is anchored at both ends.
"""

import re


KMS_KEY_ID_PATTERN = r"[a-f0-9-]+"
ALIAS_PATTERN = r"alias/[a-zA-Z0-9:/_-]+"
KMS_ARN_START_PATTERN = r"arn:aws:kms:([a-z]{2}-(gov-)?[a-z]+-[0-9])?:([0-9]{12}):"

KMS_KEY_PATTERNS = (
    re.compile(KMS_KEY_ID_PATTERN),
    re.compile(ALIAS_PATTERN),
    re.compile(f"{KMS_ARN_START_PATTERN}key/{KMS_KEY_ID_PATTERN}"),
    re.compile(f"{KMS_ARN_START_PATTERN}{ALIAS_PATTERN}"),
)


def is_valid_kms_key(kms_key: str) -> bool:
    """Check whether a string has the shape of a KMS key identifier.

    Args:
        kms_key: Key id, alias, key ARN or alias ARN

    Returns:
        True if the string matches one of the accepted shapes
    """
    return any(pattern.fullmatch(kms_key) for pattern in KMS_KEY_PATTERNS)
