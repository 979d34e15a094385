from .hoist import handle_hoist
from .organize import handle_organize

__all__ = [
  "handle_hoist",
  "handle_organize",
]
