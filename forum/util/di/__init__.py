"""Dependency injection module."""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete providers
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    A provider without subclasses is concrete and used as-is. A provider
    with subclasses is a swappable component; the subclass whose
    ``__is_mock__`` matches ``use_mock`` is returned.

    Args:
        base: Provider base class
        use_mock: Whether to use the test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no matching implementation is registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
