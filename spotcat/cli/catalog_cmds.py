"""Catalog lookup commands (artists, albums, tracks)."""

from __future__ import annotations
import click
import logging

from .helpers import cli, get_client, emit, api_command
from ..ids import ID
from ..options import AlbumType, Options

logger = logging.getLogger(__name__)


def _options(market: str | None, limit: int | None, offset: int | None) -> Options | None:
    if market is None and limit is None and offset is None:
        return None
    return Options(country=market, limit=limit, offset=offset)


def _album_type(text: str | None) -> AlbumType | None:
    if text is None:
        return None
    try:
        return AlbumType.decode(text)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--type')


paging_options = [
    click.option('--market', default=None, help='ISO 3166-1 alpha-2 country code'),
    click.option('--limit', type=int, default=None, help='Maximum number of items'),
    click.option('--offset', type=int, default=None, help='Index of the first item'),
]


def with_paging(func):
    for opt in reversed(paging_options):
        func = opt(func)
    return func


@cli.command()
@click.argument('artist_id')
@click.pass_context
@api_command
def artist(ctx: click.Context, artist_id: str):
    """Show a single artist."""
    emit(get_client(ctx).find_artist(ID(artist_id)))


@cli.command()
@click.argument('artist_ids', nargs=-1, required=True)
@click.pass_context
@api_command
def artists(ctx: click.Context, artist_ids: tuple):
    """Show several artists; unknown IDs print as null."""
    emit(get_client(ctx).find_artists(*[ID(a) for a in artist_ids]))


@cli.command(name='top-tracks')
@click.argument('artist_id')
@click.option('--country', default='US', show_default=True, help='ISO 3166-1 alpha-2 country code')
@click.pass_context
@api_command
def top_tracks(ctx: click.Context, artist_id: str, country: str):
    """Show an artist's top tracks in a country."""
    emit(get_client(ctx).artists_top_tracks(ID(artist_id), country))


@cli.command()
@click.argument('artist_id')
@click.pass_context
@api_command
def related(ctx: click.Context, artist_id: str):
    """Show artists related to an artist."""
    emit(get_client(ctx).find_related_artists(ID(artist_id)))


@cli.command()
@click.argument('artist_id')
@with_paging
@click.option('--type', 'album_type', default=None, help='Comma-separated: album,single,appears_on,compilation')
@click.pass_context
@api_command
def albums(ctx: click.Context, artist_id: str, market: str | None, limit: int | None,
           offset: int | None, album_type: str | None):
    """Show one page of an artist's albums."""
    options = _options(market, limit, offset)
    types = _album_type(album_type)
    if types is not None and options is None:
        # album_type is only sent together with options
        options = Options()
    page = get_client(ctx).artist_albums_opt(ID(artist_id), options, types)
    logger.debug(f"{len(page.items)} of {page.total} albums")
    emit(page)


@cli.command()
@click.argument('album_id')
@click.pass_context
@api_command
def album(ctx: click.Context, album_id: str):
    """Show a single album."""
    emit(get_client(ctx).find_album(ID(album_id)))


@cli.command(name='album-tracks')
@click.argument('album_id')
@with_paging
@click.pass_context
@api_command
def album_tracks(ctx: click.Context, album_id: str, market: str | None, limit: int | None, offset: int | None):
    """Show one page of an album's tracks."""
    emit(get_client(ctx).album_tracks_opt(ID(album_id), _options(market, limit, offset)))


@cli.command()
@click.argument('track_id')
@click.pass_context
@api_command
def track(ctx: click.Context, track_id: str):
    """Show a single track."""
    emit(get_client(ctx).find_track(ID(track_id)))


@cli.command()
@click.argument('track_ids', nargs=-1, required=True)
@click.pass_context
@api_command
def tracks(ctx: click.Context, track_ids: tuple):
    """Show several tracks; unknown IDs print as null."""
    emit(get_client(ctx).find_tracks(*[ID(t) for t in track_ids]))
