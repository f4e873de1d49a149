"""Application bootstrap - wires the view paths service to its collaborators."""

from __future__ import annotations

from typing import Callable, Optional

from jinja2 import Environment

from view_paths.application.services.view_paths_service import ViewPathsService
from view_paths.config.manager import ConfigurationManager
from view_paths.config.schemas import ViewPathsConfig
from view_paths.domain.base.ports import CacheStorePort, LocalePort, LoggingPort, ViewRegistrarPort
from view_paths.infrastructure.adapters.jinja_view_registrar import JinjaViewRegistrar
from view_paths.infrastructure.adapters.logging_adapter import ViewPathsLogger
from view_paths.infrastructure.cache import create_cache_store
from view_paths.infrastructure.logging.logger import get_logger

LoadPolicy = Callable[[], bool]


def always_load() -> bool:
    """Default load policy: register paths in every execution context."""
    return True


class ViewPathsProvider:
    """
    Registers and boots the view paths service.

    ``register()`` builds the service once; ``boot()`` loads the paths when
    the package is enabled and the host's ``should_load`` policy agrees.
    Whether paths belong in a given execution context (web worker, queue
    worker, console) is the host's decision.
    """

    def __init__(
        self,
        config: ViewPathsConfig,
        registrar: ViewRegistrarPort,
        cache: Optional[CacheStorePort] = None,
        logger: Optional[LoggingPort] = None,
        locale: Optional[LocalePort] = None,
        should_load: LoadPolicy = always_load,
    ) -> None:
        """Initialize the instance."""
        self.config = config
        self.registrar = registrar
        self._cache = cache
        self._logger = logger
        self.locale = locale
        self.should_load = should_load
        self._service: Optional[ViewPathsService] = None
        self._booted = False
        self.logger = get_logger(__name__)

    @classmethod
    def for_environment(
        cls, environment: Environment, config: ViewPathsConfig, **kwargs
    ) -> "ViewPathsProvider":
        """Create a provider that registers paths with a Jinja2 environment."""
        return cls(config, JinjaViewRegistrar(environment), **kwargs)

    @classmethod
    def from_config_file(
        cls, config_path: Optional[str], environment: Environment, **kwargs
    ) -> "ViewPathsProvider":
        """Create a provider from a configuration file (or the default search)."""
        config = ConfigurationManager(config_path).config
        return cls.for_environment(environment, config, **kwargs)

    @property
    def service(self) -> ViewPathsService:
        """The view paths service, registered on first access."""
        if self._service is None:
            self.register()
        return self._service

    @property
    def booted(self) -> bool:
        return self._booted

    def register(self) -> ViewPathsService:
        """Build the singleton view paths service."""
        if self._service is None:
            self._service = ViewPathsService(
                self.config,
                cache=self._cache if self._cache is not None else create_cache_store(self.config),
                registrar=self.registrar,
                logger=self._logger or ViewPathsLogger(self.config.logging),
                locale=self.locale,
            )
        return self._service

    def boot(self) -> bool:
        """
        Load view paths into the registrar.

        Returns:
            True if paths were loaded, False if the package is disabled or
            the load policy declined
        """
        if not self.config.enabled:
            self.logger.debug("View paths disabled, skipping boot")
            return False

        if not self.should_load():
            self.logger.debug("Load policy declined view paths for this execution context")
            return False

        service = self.register()
        service.load_paths()
        service.register_views_info_logger()
        service.set_locale()
        self._booted = True
        return True
