"""Test DI providers."""

from .container import MockConfigProvider, build_test_container

__all__ = [
    "MockConfigProvider",
    "build_test_container",
]
