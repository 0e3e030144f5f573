"""Dependency injection module."""

from typing import Type

from invitelink.util.di.application import ProdApplicationProvider
from invitelink.util.di.base import ProviderBase
from invitelink.util.di.core import ProdConfigProvider
from invitelink.util.di.domain import ProdDomainProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]

__all__ = [
    "ProviderBase",
    "PROVIDERS",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
]
