"""Unit tests for the two-phase page decoder."""

import json

import pytest

from spotcat.errors import DecodeError
from spotcat.models import SimpleAlbum
from spotcat.paging import decode_page, decode_raw_page
from tests.mocks.catalog_payloads import page_json, simple_album_json

HREF = "https://api.spotify.com/v1/artists/art1/albums?offset=20&limit=10"


def _albums(n):
    return [simple_album_json(f"alb{i}") for i in range(n)]


class TestDecodePage:
    def test_envelope_and_item_order(self):
        body = json.dumps(page_json(_albums(10), HREF, total=37, limit=10, offset=20,
                                    next="https://next", previous="https://prev"))
        page = decode_page(body, SimpleAlbum.from_dict)

        assert page.total == 37
        assert page.limit == 10
        assert page.offset == 20
        assert page.endpoint == HREF
        assert page.next == "https://next"
        assert page.previous == "https://prev"
        assert [a.id for a in page.items] == [f"alb{i}" for i in range(10)]
        assert len(page) == 10
        assert page.has_next

    def test_accepts_bytes(self):
        body = json.dumps(page_json(_albums(1), HREF)).encode("utf-8")
        page = decode_page(body, SimpleAlbum.from_dict)
        assert page.items[0].name == "Album alb0"

    def test_null_links(self):
        page = decode_page(page_json([], HREF), SimpleAlbum.from_dict)
        assert page.next is None
        assert page.previous is None
        assert not page.has_next
        assert page.items == ()

    def test_custom_items_field(self):
        data = page_json([], HREF)
        data["albums"] = data.pop("items")
        data["albums"] = _albums(2)
        page = decode_page(data, SimpleAlbum.from_dict, items_field="albums")
        assert [a.id for a in page] == ["alb0", "alb1"]

    def test_raw_page_keeps_items_untyped(self):
        raw = decode_raw_page(page_json(_albums(2), HREF))
        assert isinstance(raw.items, list)
        assert raw.items[0]["id"] == "alb0"
        page = raw.specialize(SimpleAlbum.from_dict)
        assert isinstance(page.items[0], SimpleAlbum)


class TestDecodePageFailures:
    def test_malformed_json(self):
        with pytest.raises(DecodeError, match="malformed JSON"):
            decode_page("{not json", SimpleAlbum.from_dict)

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            decode_page("[1, 2]", SimpleAlbum.from_dict)

    @pytest.mark.parametrize("key", ["total", "limit", "offset", "href"])
    def test_missing_scalar(self, key):
        data = page_json([], HREF)
        del data[key]
        with pytest.raises(DecodeError, match=key):
            decode_page(data, SimpleAlbum.from_dict)

    def test_mistyped_scalar(self):
        data = page_json([], HREF)
        data["total"] = "37"
        with pytest.raises(DecodeError, match="total"):
            decode_page(data, SimpleAlbum.from_dict)

    def test_bool_is_not_a_count(self):
        data = page_json([], HREF)
        data["limit"] = True
        with pytest.raises(DecodeError, match="limit"):
            decode_page(data, SimpleAlbum.from_dict)

    def test_missing_items_field(self):
        data = page_json([], HREF)
        with pytest.raises(DecodeError, match="albums"):
            decode_page(data, SimpleAlbum.from_dict, items_field="albums")

    def test_items_not_a_list(self):
        data = page_json([], HREF)
        data["items"] = {"id": "x"}
        with pytest.raises(DecodeError, match="array"):
            decode_page(data, SimpleAlbum.from_dict)

    def test_item_fails_to_decode(self):
        data = page_json([{"name": "no id"}], HREF)
        with pytest.raises(DecodeError, match="id"):
            decode_page(data, SimpleAlbum.from_dict)

    def test_null_item(self):
        data = page_json([simple_album_json("a"), None], HREF)
        with pytest.raises(DecodeError, match="index 1"):
            decode_page(data, SimpleAlbum.from_dict)
