"""Package metadata and naming constants."""

PACKAGE_NAME = "oo-design-notes"
PACKAGE_NAME_SHORT = "oodnotes"
__version__ = "1.0.0"

ENV_PREFIX = PACKAGE_NAME_SHORT.upper()
