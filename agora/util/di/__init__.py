"""Dependency injection wiring.

Providers are listed once in PROVIDERS. A provider with subclasses is a
mockable component: its subclasses are the production and mock variants,
told apart by ``__is_mock__``.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable: "persistence"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Raises:
        ValueError: If a mockable component lacks the requested variant
    """
    variants = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not variants:
        return base
    if use_mock not in variants:
        component = base.__mock_component__ or base.__name__
        raise ValueError(
            f"Component {component!r} has no {'mock' if use_mock else 'production'}"
            " provider"
        )
    return variants[use_mock]


__all__ = [
    "PROVIDERS",
    "Component",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
