from __future__ import annotations
import click

from ..api import PetRegistryClient, WebLinks
from ..config import load_typed_config
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="petfinder-quicksearch")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Quick search over the lost-and-found pet registry.

    \b
    Examples:
      pfq suggest "black labrador"   # Grouped suggestions, as in the widget
      pfq search "ginger cat"        # Raw matching listings
      pfq recent --limit 10          # Newest listings
      pfq config -s suggest          # Effective configuration
    """
    if isinstance(ctx.obj, dict):
        return
    overrides = {'log_level': log_level.upper()} if log_level else None
    ctx.obj = load_typed_config(overrides).to_dict()


def get_client(cfg: dict) -> PetRegistryClient:
    api = cfg['api']
    return PetRegistryClient(api['base_url'], timeout=api['timeout'], retries=api['retries'])


def get_links(cfg: dict) -> WebLinks:
    return WebLinks(cfg['web']['base_url'])


__all__ = ["cli", "get_client", "get_links"]
