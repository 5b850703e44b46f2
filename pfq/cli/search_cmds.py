"""Search, suggestion and listing commands."""

from __future__ import annotations
import json as _json
import logging

import click

from ..api.errors import SearchError
from ..suggest.highlight import highlight
from ..suggest.models import RawResult, total_listings
from ..suggest.pipeline import fetch_suggestions
from .helpers import cli, get_client, get_links

logger = logging.getLogger(__name__)


def _styled(text: str, query: str) -> str:
    return "".join(
        click.style(seg.text, fg='yellow', bold=True) if seg.matched else seg.text
        for seg in highlight(text, query)
    )


def _record_line(record: RawResult) -> str:
    parts = [str(record.id), record.kind or "Animal"]
    if record.district:
        parts.append(record.district)
    parts.append(record.description or "")
    return " | ".join(parts)


@cli.command()
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Print groups as JSON.")
@click.pass_context
def suggest(ctx: click.Context, query: str, as_json: bool):
    """Show grouped suggestions for QUERY exactly as the quick search would."""
    cfg = ctx.obj
    opts = cfg['suggest']
    if len(query) < opts['min_query_length']:
        click.echo(f"Type at least {opts['min_query_length']} characters to get suggestions.")
        return

    client = get_client(cfg)
    links = get_links(cfg)
    groups = fetch_suggestions(client.search_orders, query, opts['max_groups'])

    if as_json:
        click.echo(_json.dumps([g.to_dict() for g in groups], indent=2, ensure_ascii=False, default=str))
        return
    if not groups:
        click.echo(f'Nothing found for "{query}"')
        return

    click.echo(f"Descriptions found: {len(groups)}")
    for g in groups:
        badge = click.style(f"[{g.count}]", fg='cyan')
        click.echo(f"{badge} {_styled(g.display_description, query)}")
        if g.is_single:
            click.echo(f"    {links.detail_url(g.example_id)}")
            continue
        for member in g.examples(opts['max_examples']):
            extra = f" • {member.district}" if member.district else ""
            click.echo(f"    • {member.kind or 'Animal'}{extra}")
        hidden = g.hidden_count(opts['max_examples'])
        if hidden:
            click.echo(f"    … and {hidden} more")
        click.echo(f"    {links.filtered_list_url(g.display_description)}")
    click.echo(f"{total_listings(groups)} listings in total: {links.filtered_list_url(query.strip())}")


@cli.command()
@click.argument("query")
@click.pass_context
def search(ctx: click.Context, query: str):
    """List raw listings matching QUERY."""
    client = get_client(ctx.obj)
    try:
        records = client.search_orders(query)
    except SearchError as e:
        raise click.ClickException(str(e))
    for record in records:
        click.echo(_record_line(record))
    click.echo(click.style(f"{len(records)} listings", fg='green'))


@cli.command()
@click.option("--limit", "-n", type=int, default=6, show_default=True, help="Number of listings to show.")
@click.pass_context
def recent(ctx: click.Context, limit: int):
    """Show the newest listings."""
    client = get_client(ctx.obj)
    try:
        pets = client.latest_pets(limit)
    except SearchError as e:
        raise click.ClickException(str(e))
    for pet in pets:
        date = pet.data.get("date") or "-"
        click.echo(f"{date}  {_record_line(pet)}")


__all__ = ["suggest", "search", "recent"]
