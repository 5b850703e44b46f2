"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from pfq.cli.helpers import cli  # root group
from pfq.cli import search_cmds  # noqa: F401
from pfq.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
