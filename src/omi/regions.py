"""Copy target region reconciliation.

This module deduplicates the regions an OMI is copied to, drops the region
the OMI is originally created in, and cross-checks the remaining regions
against the per-region KMS key map.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import ErrorKind, OMIValidationError


logger = logging.getLogger(__name__)


def reconcile_regions(
    regions: Sequence[str],
    region_kms_key_ids: Dict[str, str],
    origin_region: Optional[str] = None,
) -> Tuple[List[str], List[OMIValidationError]]:
    """Deduplicate copy target regions and drop the origin region.

    Args:
        regions: Requested copy target regions, possibly with duplicates
        region_kms_key_ids: Mapping of region name to KMS key id
        origin_region: Region the OMI is built in, if known

    Returns:
        Tuple of (final regions in first-seen order, validation errors)
    """
    errors: List[OMIValidationError] = []
    final_regions: List[str] = []
    seen = set()

    for region in regions:
        if region in seen:
            continue
        seen.add(region)

        if region_kms_key_ids and region not in region_kms_key_ids:
            errors.append(OMIValidationError(
                kind=ErrorKind.REGION_MISMATCH,
                message=f"Region {region} is in omi_regions but not in region_kms_key_ids",
            ))

        if origin_region is not None and region == origin_region:
            logger.info(
                f"Cannot copy OMI to OUTSCALE session region '{region}', "
                "deleting it from `omi_regions`."
            )
            continue

        final_regions.append(region)

    return final_regions, errors


def find_unknown_regions(regions: Sequence[str], known_regions: Sequence[str]) -> List[str]:
    """Return the regions that are not in the known region list, in order."""
    known = set(known_regions)
    unknown = []
    for region in regions:
        if region not in known and region not in unknown:
            unknown.append(region)
    return unknown
