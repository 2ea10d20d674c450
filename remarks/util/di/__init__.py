"""Dependency injection for the comment subsystem.

Providers are listed once in ``PROVIDERS``. A provider with subclasses is a
mockable component (persistence, rate limiting) and the concrete class is
chosen per container; a provider without subclasses is used as is.
"""

from typing import Type

from remarks.util.di.application import ProdApplicationProvider
from remarks.util.di.base import Component, ProviderBase
from remarks.util.di.core import ProdConfigProvider
from remarks.util.di.domain import ProdDomainProvider
from remarks.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRateLimitProvider,
    RateLimitProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    NotificationProvider,
    # Mockable components
    PersistenceProvider,
    RateLimitProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the ``__is_mock__`` implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "RateLimitProvider",
    "ProdPersistenceProvider",
    "ProdRateLimitProvider",
]
