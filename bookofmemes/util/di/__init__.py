"""Dependency injection wiring."""

from bookofmemes.util.di.application import ProdApplicationProvider
from bookofmemes.util.di.base import Component, ProviderBase
from bookofmemes.util.di.core import ProdConfigProvider
from bookofmemes.util.di.domain import ProdDomainProvider
from bookofmemes.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Containers are built from these, in order; mockable components last
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
]
