"""Process-wide default client and module-level shortcuts.

``DEFAULT_CLIENT`` is built once at import time with a plain
``requests.Session``. It is safe for concurrent read-only use; do not mutate
it. Callers needing credentials, a different base URL or another market
policy should construct their own :class:`~spotcat.client.Client` (or attach
auth to ``DEFAULT_CLIENT.session`` before the first call).
"""
from __future__ import annotations
from typing import List

from .client import Client
from .ids import ID
from .models import FullAlbum, FullArtist, FullTrack, SimpleAlbum, SimpleTrack
from .options import AlbumType, Options
from .paging import Page

DEFAULT_CLIENT = Client()


def find_artist(id: ID) -> FullArtist:
    return DEFAULT_CLIENT.find_artist(id)


def find_artists(*ids: ID) -> List[FullArtist | None]:
    return DEFAULT_CLIENT.find_artists(*ids)


def artists_top_tracks(artist_id: ID, country: str) -> List[FullTrack]:
    return DEFAULT_CLIENT.artists_top_tracks(artist_id, country)


def find_related_artists(id: ID) -> List[FullArtist]:
    return DEFAULT_CLIENT.find_related_artists(id)


def artist_albums(artist_id: ID) -> Page[SimpleAlbum]:
    return DEFAULT_CLIENT.artist_albums(artist_id)


def artist_albums_opt(
    artist_id: ID, options: Options | None = None, album_type: AlbumType | None = None
) -> Page[SimpleAlbum]:
    return DEFAULT_CLIENT.artist_albums_opt(artist_id, options, album_type)


def find_album(id: ID) -> FullAlbum:
    return DEFAULT_CLIENT.find_album(id)


def find_albums(*ids: ID) -> List[FullAlbum | None]:
    return DEFAULT_CLIENT.find_albums(*ids)


def album_tracks(id: ID) -> Page[SimpleTrack]:
    return DEFAULT_CLIENT.album_tracks(id)


def album_tracks_opt(id: ID, options: Options | None = None) -> Page[SimpleTrack]:
    return DEFAULT_CLIENT.album_tracks_opt(id, options)


def find_track(id: ID) -> FullTrack:
    return DEFAULT_CLIENT.find_track(id)


def find_tracks(*ids: ID) -> List[FullTrack | None]:
    return DEFAULT_CLIENT.find_tracks(*ids)


__all__ = [
    "DEFAULT_CLIENT",
    "find_artist",
    "find_artists",
    "artists_top_tracks",
    "find_related_artists",
    "artist_albums",
    "artist_albums_opt",
    "find_album",
    "find_albums",
    "album_tracks",
    "album_tracks_opt",
    "find_track",
    "find_tracks",
]
