# appresync Client Module
# Remote resync operation and function-listing cache

from appresync.client.base import CacheInvalidator, ResyncOperation, TransportError
from appresync.client.cache import CacheEntry, TaggedCache
from appresync.client.graphql import RESYNC_APP_MUTATION, GraphQLResyncClient

__all__ = [
    # Interfaces
    "ResyncOperation",
    "CacheInvalidator",
    "TransportError",
    # Cache
    "TaggedCache",
    "CacheEntry",
    # GraphQL
    "GraphQLResyncClient",
    "RESYNC_APP_MUTATION",
]
