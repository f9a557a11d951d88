"""Identifier types and link helpers.

Catalog IDs, URIs and endpoint URLs are all plain strings on the wire. The
``NewType`` wrappers below keep them apart at call sites without any runtime
cost.
"""
from __future__ import annotations
from typing import NewType, Tuple

ID = NewType("ID", str)
"""Spotify catalog ID, e.g. ``0OdUWJ0sBjDrqHygGUXeCF``."""

URI = NewType("URI", str)
"""Spotify resource URI, e.g. ``spotify:artist:0OdUWJ0sBjDrqHygGUXeCF``."""

Endpoint = NewType("Endpoint", str)
"""Absolute Web API URL (the ``href`` field of catalog objects)."""

URI_SCHEME = "spotify"
WEB_BASE = "https://open.spotify.com"


def to_uri(kind: str, id: ID) -> URI:
    """Build a ``spotify:<kind>:<id>`` URI."""
    return URI(f"{URI_SCHEME}:{kind}:{id}")


def parse_uri(uri: str) -> Tuple[str, ID]:
    """Split a ``spotify:<kind>:<id>`` URI into its kind and catalog ID.

    Raises:
        ValueError: If the string is not a three-part spotify URI
    """
    parts = uri.split(":")
    if len(parts) != 3 or parts[0] != URI_SCHEME or not parts[1] or not parts[2]:
        raise ValueError(f"Not a spotify URI: {uri!r}")
    return parts[1], ID(parts[2])


def ids_param(ids) -> str:
    """Join IDs for the ``ids`` query parameter, keeping order and duplicates."""
    return ",".join(str(i) for i in ids)


class SpotifyLinkGenerator:
    """Generates Spotify web URLs for artists, albums and tracks."""

    def artist_url(self, artist_id: str) -> str:
        return f"{WEB_BASE}/artist/{artist_id}"

    def album_url(self, album_id: str) -> str:
        return f"{WEB_BASE}/album/{album_id}"

    def track_url(self, track_id: str) -> str:
        return f"{WEB_BASE}/track/{track_id}"


__all__ = [
    "ID",
    "URI",
    "Endpoint",
    "to_uri",
    "parse_uri",
    "ids_param",
    "SpotifyLinkGenerator",
]
