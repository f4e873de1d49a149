"""Tests for the Jinja2 view registrar."""
import os
from contextvars import copy_context
from unittest.mock import Mock

import pytest
from jinja2 import DictLoader, Environment, TemplateNotFound

from view_paths.infrastructure.adapters.jinja_view_registrar import JinjaViewRegistrar


def make_views(root, name, templates):
    """Create a directory holding ``templates`` (file name -> source)."""
    directory = root / name
    directory.mkdir(parents=True)
    for file_name, source in templates.items():
        (directory / file_name).write_text(source)
    return str(directory)


@pytest.fixture
def environment():
    return Environment(loader=DictLoader({"base.html": "from host", "page.html": "host page"}))


@pytest.fixture
def registrar(environment):
    return JinjaViewRegistrar(environment)


def render(environment, name, **context):
    return environment.get_template(name).render(**context)


def render_source(environment, source, **context):
    return environment.from_string(source).render(**context)


class TestJinjaViewRegistrar:
    """Test template lookup through registered directories."""

    def test_host_loader_still_used(self, environment, registrar):
        assert render(environment, "base.html") == "from host"

    def test_location_takes_precedence_over_host_loader(self, environment, registrar, tmp_path):
        registrar.prepend_location(make_views(tmp_path, "app", {"page.html": "app page"}))

        assert render(environment, "page.html") == "app page"

    def test_last_prepended_location_wins(self, environment, registrar, tmp_path):
        first = make_views(tmp_path, "first", {"page.html": "first", "only_first.html": "only first"})
        second = make_views(tmp_path, "second", {"page.html": "second"})

        registrar.prepend_location(first)
        registrar.prepend_location(second)

        assert registrar.locations == [second, first]
        assert render(environment, "page.html") == "second"
        assert render(environment, "only_first.html") == "only first"

    def test_namespace_lookup(self, environment, registrar, tmp_path):
        registrar.prepend_namespace("admin", make_views(tmp_path, "admin", {"dashboard.html": "Hi {{ user }}"}))

        assert render(environment, "admin::dashboard.html", user="sam") == "Hi sam"
        with pytest.raises(TemplateNotFound):
            environment.get_template("dashboard.html")

    def test_namespace_paths_stack(self, environment, registrar, tmp_path):
        older = make_views(tmp_path, "older", {"nav.html": "older", "footer.html": "footer"})
        newer = make_views(tmp_path, "newer", {"nav.html": "newer"})

        registrar.prepend_namespace("shop", older)
        registrar.prepend_namespace("shop", newer)

        assert registrar.namespaces == {"shop": [newer, older]}
        assert render(environment, "shop::nav.html") == "newer"
        assert render(environment, "shop::footer.html") == "footer"

    def test_mount_components(self, environment, registrar, tmp_path):
        path = make_views(tmp_path, "components", {"button.html": "<button/>"})

        assert registrar.mount_components(path) is True
        assert render(environment, "components::button.html") == "<button/>"

    def test_anonymous_component_prefix(self, environment, registrar, tmp_path):
        registrar.register_anonymous_component_path(make_views(tmp_path, "flux", {"icon.html": "icon"}), "flux")

        assert registrar.components == {"flux": [str(tmp_path / "flux")]}
        assert render(environment, "flux::icon.html") == "icon"

    def test_namespace_wins_over_component_prefix(self, environment, registrar, tmp_path):
        registrar.register_anonymous_component_path(make_views(tmp_path, "anon", {"icon.html": "anonymous"}), "flux")
        registrar.prepend_namespace("flux", make_views(tmp_path, "named", {"icon.html": "namespaced"}))

        assert render(environment, "flux::icon.html") == "namespaced"

    def test_options_live_in_globals(self, environment, registrar):
        registrar.set_option("livewire.view_path", "/views/livewire")

        assert registrar.get_option("livewire.view_path") == "/views/livewire"
        assert registrar.get_option("missing", "default") == "default"
        assert environment.globals["view_paths"] == {"livewire.view_path": "/views/livewire"}

    def test_request_option_stays_in_its_context(self, environment, registrar):
        def set_and_read():
            registrar.set_request_option("current_locale", "fr")
            return registrar.get_option("current_locale"), render_source(environment, "{{ view_paths.current_locale }}")

        assert copy_context().run(set_and_read) == ("fr", "fr")
        assert registrar.get_option("current_locale") is None
        assert "current_locale" not in environment.globals["view_paths"]

    def test_request_option_shadows_shared_option(self, environment, registrar):
        registrar.set_option("current_locale", "en")

        def set_and_read():
            registrar.set_request_option("current_locale", "de")
            return registrar.get_option("current_locale")

        assert copy_context().run(set_and_read) == "de"
        assert registrar.get_option("current_locale") == "en"

    def test_templates_loaded_before_registration_are_reloaded(self, environment, registrar, tmp_path):
        assert render(environment, "page.html") == "host page"

        registrar.prepend_location(make_views(tmp_path, "app", {"page.html": "app page"}))

        assert render(environment, "page.html") == "app page"

    def test_environment_without_loader(self, tmp_path):
        environment = Environment()
        registrar = JinjaViewRegistrar(environment)
        registrar.prepend_location(make_views(tmp_path, "app", {"page.html": "app"}))

        assert render(environment, "page.html") == "app"


class TestRenderListeners:
    """Test render notifications."""

    def test_listener_receives_name_and_filename(self, environment, registrar, tmp_path):
        path = make_views(tmp_path, "app", {"page.html": "page"})
        registrar.prepend_location(path)
        listener = Mock()

        registrar.add_render_listener(listener)
        render(environment, "page.html")

        listener.assert_called_once_with("page.html", os.path.join(path, "page.html"))

    def test_layouts_partials_and_imports_are_reported(self, environment, registrar, tmp_path):
        path = make_views(
            tmp_path,
            "site",
            {
                "layout.html": "[{% block body %}{% endblock %}]",
                "partial.html": "partial",
                "macros.html": "{% macro shout(text) %}{{ text|upper }}{% endmacro %}",
                "page.html": (
                    '{% extends "layout.html" %}{% block body %}{% import "macros.html" as m %}'
                    '{% include "partial.html" %} {{ m.shout("hi") }}{% endblock %}'
                ),
            },
        )
        registrar.prepend_location(path)
        listener = Mock()

        registrar.add_render_listener(listener)

        assert render(environment, "page.html") == "[partial HI]"
        reported = {call.args for call in listener.call_args_list}
        assert reported == {
            (name, os.path.join(path, name)) for name in ("page.html", "layout.html", "partial.html", "macros.html")
        }

    def test_string_templates_are_reported(self, environment, registrar):
        listener = Mock()
        registrar.add_render_listener(listener)

        assert environment.from_string("{{ 1 + 1 }}").render() == "2"
        listener.assert_called_once()
        assert listener.call_args.args[0] == "<string>"

    def test_every_listener_is_called(self, environment, registrar):
        first, second = Mock(), Mock()
        registrar.add_render_listener(first)
        registrar.add_render_listener(second)

        render(environment, "base.html")

        first.assert_called_once()
        second.assert_called_once()

    def test_failing_listener_does_not_break_rendering(self, environment, registrar):
        registrar.add_render_listener(Mock(side_effect=RuntimeError("boom")))

        assert render(environment, "base.html") == "from host"
