"""View paths service.

Validates configured template directories, caches the validated result and
registers it with the host renderer.
"""
import os
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from view_paths.config.schemas import ViewPathsConfig
from view_paths.domain.base.ports import (
    CacheStorePort,
    LocalePort,
    LoggingPort,
    ViewRegistrarPort,
)
from view_paths.domain.base.results import StoreResult
from view_paths.domain.view_paths.duration import FOREVER, parse_duration
from view_paths.domain.view_paths.mount_policy import (
    COMPONENT_VIEW_PATH_OPTION,
    MountStrategy,
    resolve_mount_strategy,
)
from view_paths.domain.view_paths.value_objects import CacheEntry
from view_paths.infrastructure.adapters.logging_adapter import ViewPathsLogger

EXPIRY_FORMAT = "%Y-%m-%d %H:%M:%S"

CURRENT_LOCALE_OPTION = "current_locale"


class ViewPathsService:
    """
    Manages view paths and their caching.

    Every call against the filesystem or the cache store degrades to "skip
    this path" or "log and continue"; nothing raised by a collaborator
    reaches the caller.
    """

    def __init__(
        self,
        config: ViewPathsConfig,
        cache: CacheStorePort,
        registrar: ViewRegistrarPort,
        logger: Optional[LoggingPort] = None,
        locale: Optional[LocalePort] = None,
        is_directory: Callable[[str], bool] = os.path.isdir,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Validated view paths configuration
            cache: Cache store the validated paths are kept in
            registrar: Registers paths with the host renderer
            logger: Logger, defaults to one built from ``config.logging``
            locale: Locale port used by ``set_locale``
            is_directory: Filesystem check used to validate paths
            now: Clock used to compute cache expiry
        """
        self.config = config
        self.cache = cache
        self.registrar = registrar
        self.logger = logger or ViewPathsLogger(config.logging)
        self.locale = locale
        self._is_directory = is_directory
        self._now = now or datetime.now
        self._views_info_registered = False

    @property
    def cache_key(self) -> str:
        return self.config.cache_key

    def _log(self, message: str, level: Optional[str] = None) -> None:
        """Log a message at ``level``, or the configured level."""
        if not self.config.logging.enabled:
            return
        self.logger.log(level or self.config.logging.level, message)

    def _store_call(self, operation: str, func: Callable[..., Any], *args: Any) -> StoreResult:
        """Call the cache store, logging failures at error level."""
        result = StoreResult.capture(func, *args)
        if not result.success:
            self._log(f"Cache store {operation} failed for '{self.cache_key}': {result.error_message}", "error")
        return result

    def _cache_has_entry(self) -> bool:
        result = self._store_call("has", self.cache.has, self.cache_key)
        return bool(result.success and result.value)

    def _path_is_directory(self, path: str) -> bool:
        result = StoreResult.capture(self._is_directory, path)
        if not result.success:
            self._log(f"Could not check view path {path}: {result.error_message}", "warning")
            return False
        return bool(result.value)

    def load_paths(self) -> None:
        """Register cached (or freshly validated) view paths with the registrar."""
        try:
            self.warm_cache()

            entry = self._get_cached_entry(log_hit=True)
            if entry is None:
                entry = CacheEntry(
                    paths=self.get_valid_paths(),
                    namespaced_paths=self.get_valid_namespaced_paths(),
                )
                self._log("Retrieved view paths directly", "info")

            if entry.paths:
                for path in entry.paths:
                    self.registrar.prepend_location(path)
                self._log(f"Added {len(entry.paths)} view paths: {', '.join(entry.paths)}", "info")
            else:
                self._log("No regular view paths configured", "info")

            if entry.namespaced_paths:
                for namespace, path in entry.namespaced_paths.items():
                    self._register_namespace(namespace, path)
            else:
                self._log("No namespaced view paths configured", "info")
        except Exception as e:
            self._log(f"Failed to load view paths: {e}", "error")

    def _get_cached_entry(self, log_hit: bool = False) -> Optional[CacheEntry]:
        """Get the cached entry; None when caching is off or nothing usable is cached."""
        if not self.config.cache_enabled or not self._cache_has_entry():
            return None

        result = self._store_call("get", self.cache.get, self.cache_key, CacheEntry.empty().to_dict())
        if not result.success:
            return None

        if log_hit:
            self._log("Retrieved view paths from cache", "info")
        return CacheEntry.from_dict(result.value)

    def _register_namespace(self, namespace: str, path: str) -> None:
        strategy = resolve_mount_strategy(namespace)

        if strategy is MountStrategy.ANONYMOUS_COMPONENTS:
            self.registrar.register_anonymous_component_path(path, namespace)
            self.registrar.set_option(
                COMPONENT_VIEW_PATH_OPTION, os.path.normpath(os.path.join(path, os.pardir, "livewire"))
            )
            self._log(f"Registered anonymous components '{namespace}' from path: {path}", "info")

        if strategy is MountStrategy.COMPONENTS and self.registrar.mount_components(path):
            self._log(f"Mounted components from path: {path}", "info")
            return

        self.registrar.prepend_namespace(namespace, path)
        self._log(f"Added view namespace '{namespace}' with path: {path}", "info")

    def get_valid_paths(self) -> List[str]:
        """Filter configured paths to existing directories, keeping their order."""
        valid = [path for path in self.config.paths if self._path_is_directory(path)]

        invalid = [path for path in self.config.paths if path not in valid]
        if invalid:
            self._log(f"{len(invalid)} view path(s) were invalid: {', '.join(invalid)}", "warning")

        return valid

    def get_valid_namespaced_paths(self) -> Dict[str, str]:
        """Filter configured namespaced paths to those whose directory exists."""
        valid: Dict[str, str] = {}
        for namespace, path in self.config.namespaced_paths.items():
            if self._path_is_directory(path):
                valid[namespace] = path
            else:
                self._log(f"Invalid namespaced path for '{namespace}': {path}", "warning")
        return valid

    def warm_cache(self) -> None:
        """Validate and cache the configured paths unless already cached."""
        if not self.config.cache_enabled:
            self.clear_cache()
            self._log("Cache warming skipped (caching disabled)", "info")
            return

        has_result = self._store_call("has", self.cache.has, self.cache_key)
        if not has_result.success:
            self._log("Failed to warm cache: cache store unavailable", "error")
            return
        if has_result.value:
            return

        self._log("Paths not found in cache, warming cache", "info")

        try:
            entry = CacheEntry(
                paths=self.get_valid_paths(),
                namespaced_paths=self.get_valid_namespaced_paths(),
            )
            data = entry.to_dict()

            if self.config.cache_duration == FOREVER:
                stored = self._store_call("forever", self.cache.forever, self.cache_key, data)
                message = "View paths cached forever"
            else:
                expires_at = self.parse_duration(self.config.cache_duration)
                if expires_at is not None:
                    stored = self._store_call("put", self.cache.put, self.cache_key, data, expires_at)
                    message = f"View paths cached with expiration: {expires_at.strftime(EXPIRY_FORMAT)}"
                else:
                    stored = self._store_call("forever", self.cache.forever, self.cache_key, data)
                    message = "View paths cached forever (fallback)"

            if not stored.success:
                self._log("Failed to warm cache: could not store view paths", "error")
                return

            self._log(message, "info")
            self._log(
                f"Cache warmed with {len(entry.paths)} regular paths and "
                f"{len(entry.namespaced_paths)} namespaced paths",
                "info",
            )
        except Exception as e:
            self._log(f"Failed to warm cache: {e}", "error")

    def clear_cache(self) -> bool:
        """
        Clear the view paths cache.

        Returns:
            True if the entry was removed, False if there was nothing to do
            or the store failed
        """
        if not self.config.cache_enabled and not self._cache_has_entry():
            self._log("Cache clearing skipped (caching disabled)", "info")
            return False

        result = self._store_call("forget", self.cache.forget, self.cache_key)
        if not result.success:
            self._log(f"Failed to clear cache: {result.error_message}", "error")
            return False

        self._log(f"View paths cache cleared (cache key '{self.cache_key}')", "info")
        return True

    def parse_duration(self, duration: Any) -> Optional[datetime]:
        """Parse a cache duration into an expiry instant, None for no expiry."""
        logger = self.logger if self.config.logging.enabled else None
        return parse_duration(duration, logger=logger, now=self._now)

    def get_cache_info(self) -> Dict[str, Any]:
        """Get current cache configuration and contents."""
        return {
            "config": {
                "enabled": self.config.cache_enabled,
                "duration": self.config.cache_duration,
                "key": self.cache_key,
                "is_cached": self.is_cached(),
            },
            "paths": self.get_cached_view_paths(),
        }

    def get_cached_view_paths(self) -> Dict[str, Any]:
        """Get cached view paths, empty containers when nothing is cached."""
        entry = self._get_cached_entry()
        return (entry or CacheEntry.empty()).to_dict()

    def is_cached(self) -> bool:
        """Check if view paths are currently cached."""
        return self.config.cache_enabled and self._cache_has_entry()

    def get_namespaced_paths(self) -> Dict[str, str]:
        """Get configured namespaced paths."""
        return dict(self.config.namespaced_paths)

    def register_views_info_logger(self) -> None:
        """Log the name and path of every rendered view."""
        if not self.config.log_views_info or self._views_info_registered:
            return

        def log_view(name: str, path: Optional[str]) -> None:
            self._log(f"{name} - {path}", "info")

        self.registrar.add_render_listener(log_view)
        self._views_info_registered = True

    def set_locale(self) -> None:
        """
        Switch the application locale to the one stored in the session.

        The locale is exposed to templates as a request option on every call,
        so a request never sees the locale of an earlier one.
        """
        if self.locale is None:
            return

        try:
            locale = self.locale.get_session_locale(self.locale.default_locale)
            if not locale:
                return
            self.registrar.set_request_option(CURRENT_LOCALE_OPTION, locale)
            if self.locale.get_current_locale() != locale:
                self.locale.set_locale(locale)
        except Exception as e:
            self._log(f"Failed to set locale: {e}", "warning")
