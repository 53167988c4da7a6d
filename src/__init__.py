"""OMI Validator - Main Package.

This package validates and normalizes the configuration used to build an
OMI and copy it to other regions with encrypted snapshots.
"""

__version__ = "1.0.0"
__author__ = "OMI Validator Team"
