"""Caches available to the request client."""

from .base import CacheClient
from .memory import InMemoryCacheClient

__all__ = ['CacheClient', 'InMemoryCacheClient']
