"""
Core Text-Analysis Engine.

Scanner, import inventory, conflict resolver, edit planner and sort/group
engine. Nothing in this package touches files or the terminal; every
operation maps a text snapshot to data or to an ``EditPlan``.
"""

from haxe_hoister.core.conflicts import find_conflicts, resolve_conflicts
from haxe_hoister.core.edits import EditPlan, Insertion, LineDeletion, Replacement, apply_edits
from haxe_hoister.core.engine import HoistEngine, HoistResult, OrganizeResult
from haxe_hoister.core.grammar import DEFAULT_GRAMMAR, Grammar
from haxe_hoister.core.inventory import enumerate_imports, get_package_root
from haxe_hoister.core.planner import plan_edits
from haxe_hoister.core.scanner import match_pattern, scan_at_cursor, scan_document, scan_line
from haxe_hoister.core.sorter import group_imports, render_groups, sort_imports
from haxe_hoister.core.types import ConflictGroup, ImportInventory, ImportMeta, Target

__all__ = [
  "ConflictGroup",
  "DEFAULT_GRAMMAR",
  "EditPlan",
  "Grammar",
  "HoistEngine",
  "HoistResult",
  "ImportInventory",
  "ImportMeta",
  "Insertion",
  "LineDeletion",
  "OrganizeResult",
  "Replacement",
  "Target",
  "apply_edits",
  "enumerate_imports",
  "find_conflicts",
  "get_package_root",
  "group_imports",
  "match_pattern",
  "plan_edits",
  "render_groups",
  "resolve_conflicts",
  "scan_at_cursor",
  "scan_document",
  "scan_line",
  "sort_imports",
]
