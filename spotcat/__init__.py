"""Top-level package for spotify-catalog (spotcat).

Typed client for the Spotify Web API catalog endpoints. Version identifier is
defined in :mod:`spotcat.version` to keep a single source of truth.
"""

from .version import __version__  # re-export
from .client import Client, API_BASE
from .errors import APIError, DecodeError, ErrorEnvelope, SpotifyError
from .ids import ID, URI, Endpoint, parse_uri, to_uri
from .models import (
    ExternalURL,
    Followers,
    FullAlbum,
    FullArtist,
    FullTrack,
    Image,
    SimpleAlbum,
    SimpleArtist,
    SimpleTrack,
)
from .options import AlbumType, MarketPolicy, Options
from .paging import Page, RawPage, decode_page, decode_raw_page

__all__ = [
    "__version__",
    "Client",
    "API_BASE",
    "APIError",
    "DecodeError",
    "ErrorEnvelope",
    "SpotifyError",
    "ID",
    "URI",
    "Endpoint",
    "parse_uri",
    "to_uri",
    "ExternalURL",
    "Followers",
    "FullAlbum",
    "FullArtist",
    "FullTrack",
    "Image",
    "SimpleAlbum",
    "SimpleArtist",
    "SimpleTrack",
    "AlbumType",
    "MarketPolicy",
    "Options",
    "Page",
    "RawPage",
    "decode_page",
    "decode_raw_page",
]
