"""CLI package bootstrap.

Defines the root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from spotcat.cli.helpers import cli  # root group
from spotcat.cli import catalog_cmds  # noqa: F401

__all__ = ["cli"]
