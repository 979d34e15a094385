"""
CLI Command Handlers Facade.

Re-exports the handlers from ``haxe_hoister.cli.handlers`` so the entry point
(and tests patching it) address a single module.
"""

from haxe_hoister.cli.handlers.hoist import handle_hoist
from haxe_hoister.cli.handlers.organize import handle_organize

__all__ = [
  "handle_hoist",
  "handle_organize",
]
