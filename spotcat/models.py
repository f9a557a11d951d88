"""Catalog domain models.

Read-only mirrors of the Web API's JSON objects. The service returns the
same resource at two detail levels; a ``Full*`` model holds the matching
``Simple*`` model in its ``simple`` field and adds the extra detail fields.
Common attributes are forwarded as properties so call sites can write
``artist.name`` at either level.

Models are only created by ``from_dict``, which raises
:class:`~spotcat.errors.DecodeError` on shape mismatches.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .fields import as_object, optional, optional_list, optional_object, required, string_list
from .ids import ID, URI, Endpoint
from .paging import Page, decode_page


@dataclass(frozen=True)
class ExternalURL:
    """Known external URLs keyed by type (e.g. ``spotify``)."""
    urls: Dict[str, str] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.urls.items())))

    def get(self, key: str) -> str | None:
        return self.urls.get(key)

    @property
    def spotify(self) -> str | None:
        return self.urls.get("spotify")

    @classmethod
    def from_dict(cls, data: Any) -> ExternalURL:
        obj = as_object(data, "external_urls")
        urls = {}
        for key, value in obj.items():
            if not isinstance(value, str):
                continue  # non-URL extras are ignored
            urls[key] = value
        return cls(urls)


@dataclass(frozen=True)
class Image:
    url: str
    height: int | None = None
    width: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Image:
        obj = as_object(data, "image")
        return cls(
            url=required(obj, "url", str),
            height=optional(obj, "height", int),
            width=optional(obj, "width", int),
        )


@dataclass(frozen=True)
class Followers:
    total: int
    endpoint: Endpoint | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Followers:
        obj = as_object(data, "followers")
        return cls(total=required(obj, "total", int), endpoint=_endpoint(obj))


def _external_urls(obj) -> ExternalURL:
    return optional_object(obj, "external_urls", ExternalURL.from_dict) or ExternalURL()


def _endpoint(obj) -> Endpoint | None:
    href = optional(obj, "href", str)
    return Endpoint(href) if href is not None else None


def _uri(obj) -> URI | None:
    uri = optional(obj, "uri", str)
    return URI(uri) if uri is not None else None


# ---------------- Artists -----------------

@dataclass(frozen=True)
class SimpleArtist:
    name: str
    id: ID
    uri: URI | None = None
    endpoint: Endpoint | None = None
    external_urls: ExternalURL = field(default_factory=ExternalURL)

    @classmethod
    def from_dict(cls, data: Any) -> SimpleArtist:
        obj = as_object(data, "artist")
        return cls(
            name=required(obj, "name", str),
            id=ID(required(obj, "id", str)),
            uri=_uri(obj),
            endpoint=_endpoint(obj),
            external_urls=_external_urls(obj),
        )


@dataclass(frozen=True)
class FullArtist:
    """Artist with popularity, genres, followers and images.

    ``popularity`` ranges 0-100 and is derived from the artist's tracks.
    ``images`` are ordered widest first.
    """
    simple: SimpleArtist
    popularity: int = 0
    genres: Tuple[str, ...] = ()
    followers: Followers | None = None
    images: Tuple[Image, ...] = ()

    @property
    def name(self) -> str:
        return self.simple.name

    @property
    def id(self) -> ID:
        return self.simple.id

    @property
    def uri(self) -> URI | None:
        return self.simple.uri

    @classmethod
    def from_dict(cls, data: Any) -> FullArtist:
        obj = as_object(data, "artist")
        return cls(
            simple=SimpleArtist.from_dict(obj),
            popularity=optional(obj, "popularity", int, 0),
            genres=string_list(obj, "genres"),
            followers=optional_object(obj, "followers", Followers.from_dict),
            images=optional_list(obj, "images", Image.from_dict),
        )


# ---------------- Albums -----------------

@dataclass(frozen=True)
class SimpleAlbum:
    name: str
    id: ID
    uri: URI | None = None
    endpoint: Endpoint | None = None
    album_type: str | None = None
    artists: Tuple[SimpleArtist, ...] = ()
    images: Tuple[Image, ...] = ()
    available_markets: Tuple[str, ...] = ()
    external_urls: ExternalURL = field(default_factory=ExternalURL)

    @classmethod
    def from_dict(cls, data: Any) -> SimpleAlbum:
        obj = as_object(data, "album")
        return cls(
            name=required(obj, "name", str),
            id=ID(required(obj, "id", str)),
            uri=_uri(obj),
            endpoint=_endpoint(obj),
            album_type=optional(obj, "album_type", str),
            artists=optional_list(obj, "artists", SimpleArtist.from_dict),
            images=optional_list(obj, "images", Image.from_dict),
            available_markets=string_list(obj, "available_markets"),
            external_urls=_external_urls(obj),
        )


# ---------------- Tracks -----------------

@dataclass(frozen=True)
class SimpleTrack:
    name: str
    id: ID
    uri: URI | None = None
    endpoint: Endpoint | None = None
    artists: Tuple[SimpleArtist, ...] = ()
    duration_ms: int | None = None
    explicit: bool = False
    disc_number: int | None = None
    track_number: int | None = None
    preview_url: str | None = None
    available_markets: Tuple[str, ...] = ()
    external_urls: ExternalURL = field(default_factory=ExternalURL)

    @classmethod
    def from_dict(cls, data: Any) -> SimpleTrack:
        obj = as_object(data, "track")
        return cls(
            name=required(obj, "name", str),
            id=ID(required(obj, "id", str)),
            uri=_uri(obj),
            endpoint=_endpoint(obj),
            artists=optional_list(obj, "artists", SimpleArtist.from_dict),
            duration_ms=optional(obj, "duration_ms", int),
            explicit=optional(obj, "explicit", bool, False),
            disc_number=optional(obj, "disc_number", int),
            track_number=optional(obj, "track_number", int),
            preview_url=optional(obj, "preview_url", str),
            available_markets=string_list(obj, "available_markets"),
            external_urls=_external_urls(obj),
        )


@dataclass(frozen=True)
class FullTrack:
    simple: SimpleTrack
    album: SimpleAlbum | None = None
    popularity: int = 0
    external_ids: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def name(self) -> str:
        return self.simple.name

    @property
    def id(self) -> ID:
        return self.simple.id

    @property
    def uri(self) -> URI | None:
        return self.simple.uri

    @property
    def isrc(self) -> str | None:
        return self.external_ids.get("isrc")

    @classmethod
    def from_dict(cls, data: Any) -> FullTrack:
        obj = as_object(data, "track")
        ext = optional(obj, "external_ids", dict, {})
        return cls(
            simple=SimpleTrack.from_dict(obj),
            album=optional_object(obj, "album", SimpleAlbum.from_dict),
            popularity=optional(obj, "popularity", int, 0),
            external_ids={k: v for k, v in ext.items() if isinstance(v, str)},
        )


@dataclass(frozen=True)
class FullAlbum:
    """Album with label, release date and the first page of its tracks."""
    simple: SimpleAlbum
    genres: Tuple[str, ...] = ()
    popularity: int = 0
    release_date: str | None = None
    release_date_precision: str | None = None
    label: str | None = None
    tracks: Page[SimpleTrack] | None = None

    @property
    def name(self) -> str:
        return self.simple.name

    @property
    def id(self) -> ID:
        return self.simple.id

    @property
    def uri(self) -> URI | None:
        return self.simple.uri

    @classmethod
    def from_dict(cls, data: Any) -> FullAlbum:
        obj = as_object(data, "album")
        tracks = optional(obj, "tracks", dict)
        return cls(
            simple=SimpleAlbum.from_dict(obj),
            genres=string_list(obj, "genres"),
            popularity=optional(obj, "popularity", int, 0),
            release_date=optional(obj, "release_date", str),
            release_date_precision=optional(obj, "release_date_precision", str),
            label=optional(obj, "label", str),
            tracks=decode_page(tracks, SimpleTrack.from_dict) if tracks is not None else None,
        )


__all__ = [
    "ExternalURL",
    "Image",
    "Followers",
    "SimpleArtist",
    "FullArtist",
    "SimpleAlbum",
    "FullAlbum",
    "SimpleTrack",
    "FullTrack",
]
