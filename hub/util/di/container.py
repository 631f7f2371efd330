"""Assembling the dishka container from the registered providers."""

from collections.abc import Iterable
from typing import Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from hub.util.di import PROVIDERS, Component, ProviderBase


def mockable_components() -> set[Component]:
    """Components with both a production and an in-memory implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def select_provider(base: Type[ProviderBase], mocked: set[Component]) -> ProviderBase:
    """Instantiate the implementation of ``base`` for this container.

    Providers without a component name (config, domain, application) are
    concrete and used as-is. Component providers pick the subclass whose
    ``__is_mock__`` flag matches whether the component was asked to be mocked.
    Fakes register themselves by being imported, so a mocked component whose
    fake module was never loaded is an error.

    Raises:
        ValueError: If the wanted implementation is not registered
    """
    component = base.__mock_component__
    if component is None:
        return base()

    use_mock = component in mocked
    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl()

    kind = "in-memory" if use_mock else "production"
    raise ValueError(f"No {kind} implementation registered for {component}")


def build_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the application container.

    With nothing mocked every component talks to real infrastructure:
    PostgreSQL, the upload directory and SMTP. Settings are read from the
    environment by the config provider.

    Args:
        mocked: Components to back with in-memory fakes

    Returns:
        Container that also serves FastAPI's request object

    Raises:
        ValueError: If an unknown component is named
    """
    mocked = set(mocked)
    unknown = mocked - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [select_provider(base, mocked) for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())
