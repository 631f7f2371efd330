"""Test containers: in-memory fakes unless a component is asked for real."""

from dishka import AsyncContainer

from hub.util.di import Component
from hub.util.di.container import build_container, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container backed by fakes.

    Settings come from the environment; ``tests/conftest.py`` sets the test
    defaults.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` for integration tests against PostgreSQL

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return build_container(mocked=mockable_components() - unmock)
