"""Dependency injection module.

``PROVIDERS`` is the ordered registry every container is built from. Entries
that name a ``__mock_component__`` are swappable: production and in-memory
implementations subclass them, and ``build_container`` picks one per
component.
"""

from typing import Type

from hub.util.di.application import ProdApplicationProvider
from hub.util.di.base import Component, ProviderBase
from hub.util.di.core import ProdConfigProvider
from hub.util.di.domain import ProdDomainProvider
from hub.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StorageProvider,
    EmailProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
]
