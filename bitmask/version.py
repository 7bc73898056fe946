"""
bitmask version information

This file contains the single source of truth for the package version number.
"""

# Version number (semantic versioning)
__version__ = "1.0.0"
