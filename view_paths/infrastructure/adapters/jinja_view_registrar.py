"""Jinja2 adapter implementing ViewRegistrarPort."""
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any, Dict, Iterator, List, Optional

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PrefixLoader

from view_paths.domain.base.ports import RenderListener, ViewRegistrarPort
from view_paths.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

NAMESPACE_DELIMITER = "::"
COMPONENTS_PREFIX = "components"
OPTIONS_GLOBAL = "view_paths"


class RegistrarOptions(Mapping):
    """
    Options exposed to templates as ``view_paths``.

    Shared options apply to every render. Request options are kept in a
    context variable and shadow shared ones for the current request only.
    """

    def __init__(self) -> None:
        self._shared: Dict[str, Any] = {}
        self._request: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
            f"view_paths_request_options_{id(self)}", default=None
        )

    def _merged(self) -> Dict[str, Any]:
        return {**self._shared, **(self._request.get() or {})}

    def set_shared(self, key: str, value: Any) -> None:
        self._shared[key] = value

    def set_request(self, key: str, value: Any) -> None:
        # Copy so the change never leaks into the context this one was copied from
        self._request.set({**(self._request.get() or {}), key: value})

    def __getitem__(self, key: str) -> Any:
        return self._merged()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._merged())

    def __len__(self) -> int:
        return len(self._merged())


class JinjaViewRegistrar(ViewRegistrarPort):
    """
    Registers template directories with a Jinja2 environment.

    The environment's loader is replaced with a ``ChoiceLoader`` that tries,
    in order:

    1. namespaced directories (``namespace::name``)
    2. plain locations
    3. component directories (``components::name`` and anonymous component prefixes)
    4. the loader the environment had before, if any

    Within each group the most recently prepended directory wins.
    """

    def __init__(self, environment: Environment):
        self.environment = environment
        self._fallback_loader: Optional[BaseLoader] = environment.loader
        self._locations: List[str] = []
        self._namespaces: Dict[str, List[str]] = {}
        self._components: Dict[str, List[str]] = {}
        self._listeners: List[RenderListener] = []
        self._render_hook_installed = False
        self.options = RegistrarOptions()
        environment.globals[OPTIONS_GLOBAL] = self.options
        self._rebuild_loader()

    @property
    def locations(self) -> List[str]:
        return list(self._locations)

    @property
    def namespaces(self) -> Dict[str, List[str]]:
        return {namespace: list(paths) for namespace, paths in self._namespaces.items()}

    @property
    def components(self) -> Dict[str, List[str]]:
        return {prefix: list(paths) for prefix, paths in self._components.items()}

    def _rebuild_loader(self) -> None:
        loaders: List[BaseLoader] = [
            PrefixLoader(
                {ns: FileSystemLoader(paths) for ns, paths in self._namespaces.items()},
                delimiter=NAMESPACE_DELIMITER,
            ),
            FileSystemLoader(self._locations),
            PrefixLoader(
                {prefix: FileSystemLoader(paths) for prefix, paths in self._components.items()},
                delimiter=NAMESPACE_DELIMITER,
            ),
        ]
        if self._fallback_loader is not None:
            loaders.append(self._fallback_loader)

        self.environment.loader = ChoiceLoader(loaders)
        self._clear_template_cache()

    def _clear_template_cache(self) -> None:
        if self.environment.cache is not None:
            self.environment.cache.clear()

    def prepend_location(self, path: str) -> None:
        self._locations.insert(0, path)
        self._rebuild_loader()

    def prepend_namespace(self, namespace: str, path: str) -> None:
        self._namespaces.setdefault(namespace, []).insert(0, path)
        self._rebuild_loader()

    def mount_components(self, path: str) -> bool:
        self._components.setdefault(COMPONENTS_PREFIX, []).insert(0, path)
        self._rebuild_loader()
        return True

    def register_anonymous_component_path(self, path: str, prefix: str) -> None:
        self._components.setdefault(prefix, []).insert(0, path)
        self._rebuild_loader()

    def set_option(self, key: str, value: Any) -> None:
        self.options.set_shared(key, value)

    def set_request_option(self, key: str, value: Any) -> None:
        self.options.set_request(key, value)

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def add_render_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)
        if not self._render_hook_installed:
            self._install_render_hook()

    def _notify_render(self, name: Optional[str], filename: Optional[str]) -> None:
        for listener in self._listeners:
            try:
                listener(name or "<string>", filename)
            except Exception as e:
                logger.warning(f"Render listener failed for {name}: {e}")

    def _install_render_hook(self) -> None:
        """
        Swap in a template class that reports every rendered template.

        The root render function is what runs for top-level renders as well
        as for layouts (``extends``), partials (``include``) and imported
        macro modules, so wrapping it reports all of them.
        """
        registrar = self
        base_class = self.environment.template_class

        class ObservedTemplate(base_class):  # type: ignore[valid-type,misc]
            @classmethod
            def _from_namespace(cls, environment, namespace, globals):
                template = super()._from_namespace(environment, namespace, globals)
                root_render_func = template.root_render_func

                def observed_root_render_func(context):
                    registrar._notify_render(template.name, template.filename)
                    return root_render_func(context)

                template.root_render_func = observed_root_render_func
                return template

        self.environment.template_class = ObservedTemplate
        self._clear_template_cache()
        self._render_hook_installed = True
