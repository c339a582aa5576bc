"""
Async client for a track-resolution node's REST API.

``TrackResolverClient`` resolves identifiers and search queries into tracks,
decodes encoded tracks, and manages the node's route planner.
"""

from trackresolver.client import (
    InvalidArgument,
    InvalidResponse,
    RemoteRequestFailed,
    RequestTimeout,
    TrackResolverClient,
    TrackResolverError,
)
from trackresolver.load_result import (
    LoadResult,
    LoadType,
    NoMatch,
    Playlist,
    SearchProvider,
    SearchResult,
    Track,
    parse_load_result,
)
from trackresolver.settings import ClientSettings

__all__ = [
    "ClientSettings",
    "InvalidArgument",
    "InvalidResponse",
    "LoadResult",
    "LoadType",
    "NoMatch",
    "Playlist",
    "RemoteRequestFailed",
    "RequestTimeout",
    "SearchProvider",
    "SearchResult",
    "Track",
    "TrackResolverClient",
    "TrackResolverError",
    "parse_load_result",
]
