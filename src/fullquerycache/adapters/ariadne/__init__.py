"""Ariadne framework adapter for fullquerycache."""

from fullquerycache.adapters.ariadne.graphql import FullQueryCacheGraphQL
from fullquerycache.adapters.ariadne.handler import FullQueryCacheHandler

__all__ = [
    "FullQueryCacheGraphQL",
    "FullQueryCacheHandler",
]
