"""Core interfaces (Protocol classes) for fullquerycache."""

from fullquerycache.core.interfaces.cache_backend import ICacheBackend
from fullquerycache.core.interfaces.cache_policy import ICachePolicy
from fullquerycache.core.interfaces.key_builder import IKeyBuilder
from fullquerycache.core.interfaces.serializer import ISerializer, SerializationError

__all__ = [
    "ICacheBackend",
    "ICachePolicy",
    "IKeyBuilder",
    "ISerializer",
    "SerializationError",
]
