"""FastAPI integration."""
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from view_paths.bootstrap import LoadPolicy, ViewPathsProvider, always_load
from view_paths.config.manager import ConfigurationManager
from view_paths.config.schemas import ViewPathsConfig
from view_paths.domain.base.ports import CacheStorePort, LocalePort
from view_paths.infrastructure.logging.logger import get_logger

STATE_ATTRIBUTE = "view_paths"


def install_view_paths(
    app: FastAPI,
    templates: Jinja2Templates,
    config: Optional[ViewPathsConfig] = None,
    config_path: Optional[str] = None,
    cache: Optional[CacheStorePort] = None,
    locale: Optional[LocalePort] = None,
    should_load: LoadPolicy = always_load,
) -> ViewPathsProvider:
    """
    Register view paths with a FastAPI application's templates.

    The provider boots when the application starts (inside its lifespan)
    and is stored on ``app.state.view_paths``. When a locale port is given,
    the session locale is applied at the start of every request.

    Args:
        app: FastAPI application
        templates: Templates whose Jinja2 environment receives the paths
        config: Configuration, loaded from ``config_path`` (or the default search) when omitted
        config_path: Configuration file path
        cache: Cache store, defaults to the one selected by ``config.cache_store``
        locale: Locale port
        should_load: Policy deciding whether paths are loaded in this process

    Returns:
        The registered provider
    """
    logger = get_logger(__name__)

    if config is None:
        config = ConfigurationManager(config_path).config

    provider = ViewPathsProvider.for_environment(
        templates.env, config, cache=cache, locale=locale, should_load=should_load
    )
    provider.register()
    app.state.view_paths = provider

    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def lifespan(app_: Any) -> AsyncIterator[Any]:
        if provider.boot():
            logger.info("View paths loaded")
        async with original_lifespan(app_) as state:
            yield state

    app.router.lifespan_context = lifespan

    if locale is not None:

        @app.middleware("http")
        async def apply_session_locale(request: Request, call_next):
            if provider.booted:
                provider.service.set_locale()
            return await call_next(request)

    return provider
