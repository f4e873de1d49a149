"""Tests for the view paths provider."""
from unittest.mock import Mock

import pytest
import yaml
from jinja2 import Environment

from view_paths.application.services.view_paths_service import ViewPathsService
from view_paths.bootstrap import ViewPathsProvider
from view_paths.domain.base.ports import CacheStorePort, LocalePort
from view_paths.infrastructure.adapters.jinja_view_registrar import JinjaViewRegistrar
from view_paths.infrastructure.cache import FileCacheStore, InMemoryCacheStore


class TestViewPathsProvider:
    """Test ViewPathsProvider."""

    def test_register_builds_service_once(self, make_config, registrar):
        provider = ViewPathsProvider(make_config(), registrar)

        service = provider.register()

        assert isinstance(service, ViewPathsService)
        assert provider.register() is service
        assert provider.service is service

    def test_service_uses_configured_store(self, make_config, registrar, tmp_path):
        provider = ViewPathsProvider(make_config(cache_store="file", cache_path=str(tmp_path)), registrar)

        assert isinstance(provider.service.cache, FileCacheStore)

    def test_boot_loads_paths(self, make_config, registrar, memory_cache, view_dirs):
        first, _ = view_dirs
        provider = ViewPathsProvider(make_config(paths=[first]), registrar, cache=memory_cache)

        assert provider.boot() is True

        registrar.prepend_location.assert_called_once_with(first)
        assert provider.booted is True

    def test_disabled_package_touches_nothing(self, make_config, registrar):
        cache = Mock(spec=CacheStorePort)
        provider = ViewPathsProvider(make_config(enabled=False, paths=["/a"]), registrar, cache=cache)

        assert provider.boot() is False

        assert cache.method_calls == []
        assert registrar.method_calls == []
        assert provider.booted is False

    def test_load_policy_can_decline(self, make_config, registrar):
        cache = Mock(spec=CacheStorePort)
        should_load = Mock(return_value=False)
        provider = ViewPathsProvider(make_config(), registrar, cache=cache, should_load=should_load)

        assert provider.boot() is False

        should_load.assert_called_once_with()
        assert cache.method_calls == []
        assert registrar.method_calls == []

    def test_boot_registers_views_logger_and_locale(self, make_config, registrar, memory_cache):
        locale = Mock(spec=LocalePort)
        locale.default_locale = "en"
        locale.get_session_locale.return_value = "nl"
        locale.get_current_locale.return_value = "en"
        provider = ViewPathsProvider(
            make_config(log_views_info=True), registrar, cache=memory_cache, locale=locale
        )

        provider.boot()

        registrar.add_render_listener.assert_called_once()
        locale.set_locale.assert_called_once_with("nl")

    def test_for_environment(self, make_config):
        environment = Environment()

        provider = ViewPathsProvider.for_environment(environment, make_config())

        assert isinstance(provider.registrar, JinjaViewRegistrar)
        assert provider.registrar.environment is environment

    def test_from_config_file(self, tmp_path):
        views = tmp_path / "views"
        views.mkdir()
        (views / "hello.html").write_text("Hello {{ name }}")
        config_file = tmp_path / "view_paths.yml"
        config_file.write_text(yaml.safe_dump({"paths": [str(views)], "cache_store": "memory"}))
        environment = Environment()

        provider = ViewPathsProvider.from_config_file(str(config_file), environment=environment)
        provider.boot()

        assert isinstance(provider.service.cache, InMemoryCacheStore)
        assert environment.get_template("hello.html").render(name="world") == "Hello world"

    @pytest.mark.parametrize("enabled", [True, False])
    def test_service_available_regardless_of_enabled(self, make_config, registrar, enabled):
        provider = ViewPathsProvider(make_config(enabled=enabled), registrar)

        assert provider.service.config.enabled is enabled
