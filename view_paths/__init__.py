"""View Paths - Root Package.

This package registers additional template directories and namespaced
template directories with a Jinja2 environment, validating the configured
directories against the filesystem and caching the validated result.

Key Components:
    - config: Configuration schemas and loading
    - domain: Ports, value objects and mount policy
    - application: The view paths service
    - infrastructure: Cache stores, logging and the Jinja2 registrar
    - cli: Cache administration commands
    - api: FastAPI integration

Usage:
    >>> from view_paths.bootstrap import ViewPathsProvider
    >>> provider = ViewPathsProvider.from_config_file("view_paths.yml", environment=env)
    >>> provider.boot()
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "View Paths Maintainers"
__package_name__ = PACKAGE_NAME
