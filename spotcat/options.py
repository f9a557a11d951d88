"""Optional query parameters shared by listing endpoints.

:class:`Options` holds sparsely populated parameters where ``None`` means
"not set" (``0`` is a real value). :func:`build_query` turns them into a
query string, applying the :class:`MarketPolicy` fallback for endpoints that
would otherwise return one duplicate per market.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping
from urllib.parse import urlencode

# ISO 3166-1 alpha-2 codes commonly passed as market/country
COUNTRY_USA = "US"
COUNTRY_GREAT_BRITAIN = "GB"
COUNTRY_GERMANY = "DE"
COUNTRY_FRANCE = "FR"
COUNTRY_SWEDEN = "SE"
COUNTRY_JAPAN = "JP"


@dataclass(frozen=True)
class Options:
    """Optional parameters for listing endpoints.

    Attributes:
        country: ISO 3166-1 alpha-2 code, sent as ``market``
        limit: Maximum number of items to return
        offset: Index of the first item to return
    """
    country: str | None = None
    limit: int | None = None
    offset: int | None = None


class AlbumType(enum.IntFlag):
    """Album categories accepted by the ``album_type`` filter.

    Combine with ``|`` to request several categories at once.
    """
    ALBUM = 1
    SINGLE = 2
    APPEARS_ON = 4
    COMPILATION = 8

    def encode(self) -> str:
        """Comma-joined tokens in declaration order, e.g. ``album,single``."""
        return ",".join(token for member, token in _TOKENS if member & self)

    @classmethod
    def decode(cls, text: str) -> "AlbumType":
        """Parse a comma-joined token list back into a flag set.

        Raises:
            ValueError: On an unknown token
        """
        result = cls(0)
        for raw in text.split(","):
            token = raw.strip()
            if not token:
                continue
            member = _BY_TOKEN.get(token)
            if member is None:
                raise ValueError(f"Unknown album type: {token!r}")
            result |= member
        return result


_TOKENS = (
    (AlbumType.ALBUM, "album"),
    (AlbumType.SINGLE, "single"),
    (AlbumType.APPEARS_ON, "appears_on"),
    (AlbumType.COMPILATION, "compilation"),
)
_BY_TOKEN = {token: member for member, token in _TOKENS}


@dataclass(frozen=True)
class MarketPolicy:
    """Market substitution for endpoints prone to per-market duplicates.

    Without a market, the service lists an album once for every market it is
    available in. The fallback country is sent instead when the caller gave
    options but no country. ``fallback=None`` turns the substitution off.
    """
    fallback: str | None = COUNTRY_USA

    def market_for(self, options: Options) -> str | None:
        if options.country is not None:
            return options.country
        return self.fallback


DEFAULT_MARKET_POLICY = MarketPolicy()
NO_MARKET_FALLBACK = MarketPolicy(fallback=None)


def query_params(
    options: Options | None,
    album_type: AlbumType | None = None,
    policy: MarketPolicy | None = None,
) -> Dict[str, str]:
    """Collect the parameters that were explicitly set.

    Args:
        options: Caller options; ``None`` means use service defaults
        album_type: Optional category filter
        policy: Market policy; ``None`` means country is sent only when set

    Returns:
        Mapping of parameter name to text value (empty if options is None)
    """
    if options is None:
        return {}
    values: Dict[str, str] = {}
    if album_type is not None:
        values["album_type"] = album_type.encode()
    market = policy.market_for(options) if policy is not None else options.country
    if market is not None:
        values["market"] = market
    if options.limit is not None:
        values["limit"] = str(options.limit)
    if options.offset is not None:
        values["offset"] = str(options.offset)
    return values


def encode_query(values: Mapping[str, Any]) -> str:
    """Percent-encode parameters sorted by key."""
    return urlencode(sorted((k, str(v)) for k, v in values.items()))


def build_query(
    options: Options | None,
    album_type: AlbumType | None = None,
    policy: MarketPolicy | None = None,
) -> str:
    """Build the query string (without ``?``) for a listing endpoint."""
    return encode_query(query_params(options, album_type, policy))


def with_query(url: str, query: str) -> str:
    """Append ``query`` to ``url`` only when it is non-empty."""
    if not query:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{query}"


__all__ = [
    "Options",
    "AlbumType",
    "MarketPolicy",
    "DEFAULT_MARKET_POLICY",
    "NO_MARKET_FALLBACK",
    "query_params",
    "encode_query",
    "build_query",
    "with_query",
    "COUNTRY_USA",
    "COUNTRY_GREAT_BRITAIN",
    "COUNTRY_GERMANY",
    "COUNTRY_FRANCE",
    "COUNTRY_SWEDEN",
    "COUNTRY_JAPAN",
]
