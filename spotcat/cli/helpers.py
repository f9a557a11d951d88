from __future__ import annotations
import json
import dataclasses
from functools import wraps
from typing import Any

import click
import requests

from ..config import load_typed_config, client_from_config
from ..config_types import AppConfig
from ..errors import SpotifyError
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="spotify-catalog")
@click.option('--token', default=None, help='Bearer token (overrides SPOTCAT__API__TOKEN)')
@click.option('--market-fallback', default=None, help='Market used by artist albums when none is given ("" disables)')
@click.pass_context
def cli(ctx: click.Context, token: str | None, market_fallback: str | None):
    """Query the Spotify Web API catalog.

    \b
    Examples:
      spotcat artist 0OdUWJ0sBjDrqHygGUXeCF
      spotcat artists ID1 ID2 ID1
      spotcat albums ARTIST_ID --type album,single --limit 10
      spotcat top-tracks ARTIST_ID --country GB

    Output is JSON on stdout.
    """
    if isinstance(ctx.obj, AppConfig):
        cfg = ctx.obj
    else:
        cfg = load_typed_config()
    if token is not None:
        cfg.api.token = token
    if market_fallback is not None:
        cfg.api.market_fallback = market_fallback or None
    ctx.obj = cfg


def get_client(ctx: click.Context):
    """Build a client from the context configuration."""
    return client_from_config(ctx.obj)


def to_jsonable(value: Any) -> Any:
    """Convert models (and lists of them) into JSON-compatible structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def emit(value: Any) -> None:
    click.echo(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False))


def api_command(func):
    """Turn library and transport errors into one-line CLI failures."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SpotifyError as e:
            raise click.ClickException(f"{type(e).__name__}: {e}") from e
        except requests.RequestException as e:
            raise click.ClickException(f"{type(e).__name__}: {e}") from e
    return wrapper


__all__ = ["cli", "get_client", "emit", "to_jsonable", "api_command"]
