"""Paginated result decoding.

Every listing endpoint answers with the same envelope::

    {"href": ..., "total": 37, "limit": 10, "offset": 20,
     "next": ... | null, "previous": ... | null, "items": [...]}

Only the item type (and sometimes the name of the item array) changes from
endpoint to endpoint, so decoding happens in two phases: the envelope is
read into a :class:`RawPage` that keeps the item payload untouched, then
:meth:`RawPage.specialize` decodes the items against the type the call site
asked for.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

from .errors import DecodeError, load_json
from .fields import as_object, optional, required
from .ids import Endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")

ITEMS_FIELD = "items"


@dataclass(frozen=True)
class RawPage:
    """Page envelope with the item payload not yet decoded."""
    endpoint: Endpoint
    total: int
    limit: int
    offset: int
    next: str | None
    previous: str | None
    items: Any

    def specialize(self, decode_item: Callable[[Any], T]) -> "Page[T]":
        """Decode the item payload with ``decode_item``.

        Raises:
            DecodeError: If the payload is not an array or an item fails to decode
        """
        if not isinstance(self.items, list):
            raise DecodeError(f"page items: expected JSON array, got {type(self.items).__name__}")
        items = []
        for index, raw in enumerate(self.items):
            if raw is None:
                raise DecodeError(f"page items: null entry at index {index}")
            items.append(decode_item(raw))
        return Page(
            endpoint=self.endpoint,
            total=self.total,
            limit=self.limit,
            offset=self.offset,
            next=self.next,
            previous=self.previous,
            items=tuple(items),
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing, items in server order.

    ``total`` counts all items on the server and may exceed ``len(items)``.
    """
    endpoint: Endpoint
    total: int
    limit: int
    offset: int
    next: str | None
    previous: str | None
    items: Tuple[T, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def has_next(self) -> bool:
        return self.next is not None


def decode_raw_page(body: Any, items_field: str = ITEMS_FIELD) -> RawPage:
    """First phase: decode the envelope, keep items raw.

    Args:
        body: Response body (bytes, str or parsed JSON object)
        items_field: Name of the item array in this endpoint's envelope

    Raises:
        DecodeError: If body is not JSON or envelope fields are missing/mistyped
    """
    data = as_object(load_json(body), "page")
    if items_field not in data:
        raise DecodeError(f"page has no '{items_field}' field")
    return RawPage(
        endpoint=Endpoint(required(data, "href", str)),
        total=required(data, "total", int),
        limit=required(data, "limit", int),
        offset=required(data, "offset", int),
        next=optional(data, "next", str),
        previous=optional(data, "previous", str),
        items=data[items_field],
    )


def decode_page(body: Any, decode_item: Callable[[Any], T], items_field: str = ITEMS_FIELD) -> Page[T]:
    """Decode a page envelope and its items in one call."""
    page = decode_raw_page(body, items_field).specialize(decode_item)
    logger.debug(f"Decoded page with {len(page.items)} of {page.total} items (offset={page.offset})")
    return page


__all__ = ["RawPage", "Page", "decode_raw_page", "decode_page", "ITEMS_FIELD"]
