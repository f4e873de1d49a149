"""Package metadata and naming constants."""

PACKAGE_NAME = "view-paths"
PACKAGE_NAME_SHORT = "view_paths"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Register extra template directories with a Jinja2 environment"

# Environment variable prefix used for configuration overrides
ENV_PREFIX = "VIEW_PATHS_"
