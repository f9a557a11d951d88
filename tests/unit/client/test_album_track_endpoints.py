"""Unit tests for album and track endpoints and client construction."""

import pytest

from spotcat.client import Client
from spotcat.errors import APIError, ErrorEnvelope
from spotcat.ids import ID
from spotcat.models import FullAlbum, SimpleTrack
from spotcat.options import Options
from tests.mocks.catalog_payloads import album_json, page_json, simple_track_json, track_json

API = "https://api.spotify.com/v1/"


def test_find_album(client, requests_mock):
    requests_mock.get(API + "albums/alb1", json=album_json("alb1", track_count=2))
    album = client.find_album(ID("alb1"))
    assert isinstance(album, FullAlbum)
    assert [t.id for t in album.tracks] == ["t1", "t2"]


def test_find_albums_keeps_holes(client, requests_mock, last_query):
    requests_mock.get(API + "albums", json={"albums": [None, album_json("alb1")]})
    result = client.find_albums(ID("missing"), ID("alb1"))
    assert last_query() == {"ids": ["missing,alb1"]}
    assert result[0] is None
    assert result[1].id == "alb1"


def test_album_tracks_without_options(client, requests_mock):
    url = API + "albums/alb1/tracks"
    requests_mock.get(url, json=page_json([simple_track_json("t1"), simple_track_json("t2")], url))
    page = client.album_tracks(ID("alb1"))
    assert "?" not in requests_mock.last_request.url
    assert all(isinstance(t, SimpleTrack) for t in page)


def test_album_tracks_has_no_market_fallback(client, requests_mock, last_query):
    url = API + "albums/alb1/tracks"
    requests_mock.get(url, json=page_json([], url, total=12, limit=5, offset=10))
    page = client.album_tracks_opt(ID("alb1"), Options(limit=5, offset=10))
    assert last_query() == {"limit": ["5"], "offset": ["10"]}
    assert page.total == 12


def test_find_track(client, requests_mock):
    requests_mock.get(API + "tracks/t1", json=track_json("t1", "Funeral"))
    assert client.find_track(ID("t1")).name == "Funeral"


def test_find_tracks_preserves_order(client, requests_mock):
    requests_mock.get(API + "tracks", json={"tracks": [track_json("b"), track_json("a"), None]})
    result = client.find_tracks(ID("b"), ID("a"), ID("x"))
    assert [t.id if t else None for t in result] == ["b", "a", None]


def test_custom_base_url_and_timeout(requests_mock):
    requests_mock.get("http://localhost:8080/v1/tracks/t1", json=track_json("t1"))
    client = Client(base_url="http://localhost:8080/v1", timeout=5)
    assert client.find_track(ID("t1")).id == "t1"
    assert requests_mock.last_request.timeout == 5


def test_custom_error_envelope(requests_mock):
    requests_mock.get(API + "tracks/t1", status_code=401, json={"err": {"code": 401, "msg": "expired"}})
    client = Client(error_envelope=ErrorEnvelope(error_key="err", status_key="code", message_key="msg"))
    with pytest.raises(APIError) as exc:
        client.find_track(ID("t1"))
    assert (exc.value.status, exc.value.message) == (401, "expired")


def test_any_2xx_is_success(client, requests_mock):
    requests_mock.get(API + "tracks/t1", status_code=203, json=track_json("t1"))
    assert client.find_track(ID("t1")).id == "t1"
