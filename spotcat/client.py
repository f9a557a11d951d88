"""Spotify Web API catalog client.

Every endpoint method follows the same pattern: build a URL from a fixed
template plus path-embedded IDs, optionally append query parameters, issue a
single GET and decode the body. Non-success responses are decoded through the
configured :class:`~spotcat.errors.ErrorEnvelope` into an
:class:`~spotcat.errors.APIError`.

The client holds no per-call state; one instance can be shared between
threads as long as nobody reassigns its attributes.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, TypeVar
from urllib.parse import quote

import requests

from .errors import DEFAULT_ERROR_ENVELOPE, DecodeError, ErrorEnvelope, load_json
from .fields import as_object
from .ids import ID, ids_param
from .models import FullAlbum, FullArtist, FullTrack, SimpleAlbum, SimpleTrack
from .options import (
    DEFAULT_MARKET_POLICY,
    AlbumType,
    MarketPolicy,
    Options,
    build_query,
    encode_query,
    with_query,
)
from .paging import Page, decode_page

logger = logging.getLogger(__name__)
API_BASE = "https://api.spotify.com/v1/"

T = TypeVar("T")


class Client:
    """Spotify Web API catalog client.

    Args:
        session: Transport used for every request. Authorization may already
            be attached; a fresh ``requests.Session`` is created if omitted.
        token: Optional bearer token sent with each request
        base_url: API root, must end with ``/``
        market_policy: Market fallback for duplicate-prone listings
        error_envelope: Shape of the service's error bodies
        timeout: Passed through to the transport when set
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        token: str | None = None,
        base_url: str = API_BASE,
        market_policy: MarketPolicy = DEFAULT_MARKET_POLICY,
        error_envelope: ErrorEnvelope = DEFAULT_ERROR_ENVELOPE,
        timeout: float | None = None,
    ):
        self.session = session if session is not None else requests.Session()
        self.token = token
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.market_policy = market_policy
        self.error_envelope = error_envelope
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        """Build authorization headers (empty when the session handles auth)."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _url(self, *segments: str) -> str:
        return self.base_url + "/".join(quote(s, safe="") for s in segments)

    def _get(self, url: str) -> Any:
        """Execute GET and return the decoded JSON body.

        Raises:
            requests.RequestException: Transport failure, unchanged
            APIError: Non-2xx status with a decodable error envelope
            DecodeError: Body (success or error) could not be decoded
        """
        logger.debug(f"GET {url}")
        kwargs: Dict[str, Any] = {"headers": self._headers()}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        r = self.session.get(url, **kwargs)
        if not 200 <= r.status_code < 300:
            logger.debug(f"GET {url} -> {r.status_code}")
            raise self.error_envelope.decode(r.content, r)
        return load_json(r.content)

    def _get_array(self, url: str, key: str) -> List[Any]:
        """GET a collection wrapped in a single named field."""
        data = as_object(self._get(url))
        items = data.get(key)
        if not isinstance(items, list):
            raise DecodeError(f"response has no '{key}' array", data)
        return items

    def _get_list(self, url: str, key: str, decode: Callable[[Any], T]) -> List[T]:
        return [decode(item) for item in self._get_array(url, key)]

    def _get_batch(self, url: str, key: str, decode: Callable[[Any], T]) -> List[T | None]:
        """GET a multi-ID lookup; unknown IDs stay as ``None`` in their slot."""
        items = self._get_array(url, key)
        return [decode(item) if item is not None else None for item in items]

    def _batch_url(self, path: str, ids) -> str:
        return with_query(self.base_url + path, encode_query({"ids": ids_param(ids)}))

    # ---------------- Artists -----------------

    def find_artist(self, id: ID) -> FullArtist:
        """Get catalog information for a single artist."""
        return FullArtist.from_dict(self._get(self._url("artists", id)))

    def find_artists(self, *ids: ID) -> List[FullArtist | None]:
        """Get catalog information for several artists.

        The service accepts up to 50 IDs per call. Artists are returned in
        the order requested; an unknown ID leaves ``None`` in its position
        and duplicate IDs yield duplicate artists.
        """
        return self._get_batch(self._batch_url("artists", ids), "artists", FullArtist.from_dict)

    def artists_top_tracks(self, artist_id: ID, country: str) -> List[FullTrack]:
        """Get an artist's top tracks (at most 10) in a country.

        Args:
            artist_id: Spotify artist ID
            country: ISO 3166-1 alpha-2 country code
        """
        url = with_query(self._url("artists", artist_id, "top-tracks"), encode_query({"country": country}))
        return self._get_list(url, "tracks", FullTrack.from_dict)

    def find_related_artists(self, id: ID) -> List[FullArtist]:
        """Get up to 20 artists similar to the given artist."""
        return self._get_list(self._url("artists", id, "related-artists"), "artists", FullArtist.from_dict)

    def artist_albums(self, artist_id: ID) -> Page[SimpleAlbum]:
        """Get an artist's albums using service defaults.

        Equivalent to ``artist_albums_opt(artist_id, None, None)``.
        """
        return self.artist_albums_opt(artist_id, None, None)

    def artist_albums_opt(
        self,
        artist_id: ID,
        options: Options | None = None,
        album_type: AlbumType | None = None,
    ) -> Page[SimpleAlbum]:
        """Like :meth:`artist_albums`, with optional filtering and paging.

        When ``options`` is given without a country, the client's market
        policy supplies one (``US`` by default) since the service otherwise
        returns the same album once per market. ``album_type`` is only sent
        together with ``options``. OR flags together to request several types.
        """
        query = build_query(options, album_type, self.market_policy)
        url = with_query(self._url("artists", artist_id, "albums"), query)
        return decode_page(self._get(url), SimpleAlbum.from_dict)

    # ---------------- Albums -----------------

    def find_album(self, id: ID) -> FullAlbum:
        """Get catalog information for a single album."""
        return FullAlbum.from_dict(self._get(self._url("albums", id)))

    def find_albums(self, *ids: ID) -> List[FullAlbum | None]:
        """Get several albums (up to 20); same ordering rules as :meth:`find_artists`."""
        return self._get_batch(self._batch_url("albums", ids), "albums", FullAlbum.from_dict)

    def album_tracks(self, id: ID) -> Page[SimpleTrack]:
        return self.album_tracks_opt(id, None)

    def album_tracks_opt(self, id: ID, options: Options | None = None) -> Page[SimpleTrack]:
        """Get one page of an album's tracks.

        The country is only sent as ``market`` when explicitly set.
        """
        url = with_query(self._url("albums", id, "tracks"), build_query(options))
        return decode_page(self._get(url), SimpleTrack.from_dict)

    # ---------------- Tracks -----------------

    def find_track(self, id: ID) -> FullTrack:
        """Get catalog information for a single track."""
        return FullTrack.from_dict(self._get(self._url("tracks", id)))

    def find_tracks(self, *ids: ID) -> List[FullTrack | None]:
        """Get several tracks (up to 50); same ordering rules as :meth:`find_artists`."""
        return self._get_batch(self._batch_url("tracks", ids), "tracks", FullTrack.from_dict)


__all__ = ["Client", "API_BASE"]
