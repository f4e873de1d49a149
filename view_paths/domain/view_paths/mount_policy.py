"""Mount policy for reserved namespace names."""
from enum import Enum
from typing import Dict


class MountStrategy(str, Enum):
    """How a namespaced path is handed to the view registrar."""

    NAMESPACE = "namespace"
    COMPONENTS = "components"
    ANONYMOUS_COMPONENTS = "anonymous_components"


# Namespaces with special mount behavior. Everything else is a plain namespace.
RESERVED_NAMESPACES: Dict[str, MountStrategy] = {
    "flux": MountStrategy.ANONYMOUS_COMPONENTS,
    "volt-livewire": MountStrategy.COMPONENTS,
}

# Option set on the registrar when anonymous components are registered; it
# points at the sibling "livewire" directory of the registered path.
COMPONENT_VIEW_PATH_OPTION = "livewire.view_path"


def resolve_mount_strategy(namespace: str) -> MountStrategy:
    """Get the mount strategy for ``namespace``."""
    return RESERVED_NAMESPACES.get(namespace, MountStrategy.NAMESPACE)
