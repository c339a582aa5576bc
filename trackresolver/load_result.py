"""Typed results for the node's ``/loadtracks`` endpoint."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Union, overload

TrackObject = dict[str, Any]


class LoadType(str, Enum):
    """``loadType`` values reported by the node."""

    TRACK_LOADED = "TRACK_LOADED"
    PLAYLIST_LOADED = "PLAYLIST_LOADED"
    SEARCH_RESULT = "SEARCH_RESULT"
    NO_MATCHES = "NO_MATCHES"
    LOAD_FAILED = "LOAD_FAILED"


class SearchProvider(str, Enum):
    """Search backends the node can query on our behalf."""

    SOUNDCLOUD = "soundcloud"
    YOUTUBE = "youtube"

    @property
    def prefix(self) -> str:
        return _SEARCH_PREFIXES[self]

    def apply(self, identifier: str) -> str:
        """Turn a plain query into the node's provider-search identifier."""
        return f"{self.prefix}:{identifier}"


_SEARCH_PREFIXES = {
    SearchProvider.SOUNDCLOUD: "scsearch",
    SearchProvider.YOUTUBE: "ytsearch",
}


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Nothing usable was found."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Track:
    """A single track was loaded."""

    track: TrackObject


@dataclass(frozen=True, slots=True)
class Playlist(Sequence):
    """Ordered playlist tracks with the playlist name attached."""

    name: str
    tracks: tuple[TrackObject, ...] = field(default_factory=tuple)

    @overload
    def __getitem__(self, index: int) -> TrackObject: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TrackObject, ...]: ...

    def __getitem__(self, index):
        return self.tracks[index]

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[TrackObject]:
        return iter(self.tracks)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Raw search response; callers pick from the candidates themselves."""

    data: dict[str, Any]

    @property
    def tracks(self) -> list[TrackObject]:
        return self.data.get("tracks") or []


LoadResult = Union[NoMatch, Track, Playlist, SearchResult]


def parse_load_result(data: dict[str, Any]) -> LoadResult:
    """Classify a decoded ``/loadtracks`` body.

    Unknown or failed load types are not errors; they collapse to ``NoMatch``.
    """
    if not isinstance(data, dict):
        return NoMatch()

    load_type = data.get("loadType")
    tracks = data.get("tracks") or []

    if load_type == LoadType.PLAYLIST_LOADED:
        playlist_info = data.get("playlistInfo")
        if not isinstance(playlist_info, dict):
            playlist_info = {}
        return Playlist(name=playlist_info.get("name") or "", tracks=tuple(tracks))
    if load_type == LoadType.TRACK_LOADED:
        if not tracks:
            return NoMatch()
        return Track(track=tracks[0])
    if load_type == LoadType.SEARCH_RESULT:
        return SearchResult(data=data)
    return NoMatch()
