"""Strawberry framework adapter for fullquerycache."""

from fullquerycache.adapters.strawberry.extension import create_cache_extension

__all__ = ["create_cache_extension"]
