"""Tests for the namespace mount policy."""
import pytest

from view_paths.domain.view_paths.mount_policy import MountStrategy, resolve_mount_strategy


@pytest.mark.parametrize(
    "namespace, strategy",
    [
        ("flux", MountStrategy.ANONYMOUS_COMPONENTS),
        ("volt-livewire", MountStrategy.COMPONENTS),
        ("admin", MountStrategy.NAMESPACE),
        ("Flux", MountStrategy.NAMESPACE),
        ("", MountStrategy.NAMESPACE),
    ],
)
def test_resolve_mount_strategy(namespace, strategy):
    assert resolve_mount_strategy(namespace) is strategy
