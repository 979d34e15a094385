"""
haxe-hoister Package.

Rewrites fully-qualified Haxe type references into short names backed by
hoisted ``import`` declarations, and sorts/groups existing import blocks.

Usage
-----

Simple String Hoisting
^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import haxe_hoister as hh
    code = "var x:foo.bar.Baz = new foo.bar.Baz();"
    print(hh.hoist(code))
    # import foo.bar.Baz;
    # var x:Baz = new Baz();

Step-by-step (Core Engine)
^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from haxe_hoister import DuplicatesAction, enumerate_imports, find_conflicts, plan_edits
    from haxe_hoister import resolve_conflicts, scan_document, apply_edits

    targets = scan_document(code)
    inventory = enumerate_imports(code)
    groups = find_conflicts(targets, inventory)
    resolve_conflicts(targets, inventory, groups, DuplicatesAction.ALIAS)
    new_code = apply_edits(code, plan_edits(targets, inventory))
"""

from haxe_hoister.core import (
  EditPlan,
  HoistEngine,
  HoistResult,
  ImportInventory,
  ImportMeta,
  OrganizeResult,
  Target,
  apply_edits,
  enumerate_imports,
  find_conflicts,
  get_package_root,
  group_imports,
  match_pattern,
  plan_edits,
  render_groups,
  resolve_conflicts,
  scan_at_cursor,
  scan_document,
  scan_line,
  sort_imports,
)
from haxe_hoister.enums import DuplicatesAction, GroupType, HoistMode, SortType

__version__ = "0.1.0"


def hoist(
  code: str,
  mode: HoistMode = HoistMode.FILE,
  line: int = 0,
  column: int = 0,
  policy: DuplicatesAction = DuplicatesAction.SKIP,
) -> str:
  """
  Hoists fully-qualified references in a string of Haxe code.

  Args:
      code (str): The source code.
      mode (HoistMode): Scope of the hoist (default: whole document).
      line (int): 0-based cursor line for ``CURRENT`` and ``LINE``.
      column (int): 0-based cursor column for ``CURRENT``.
      policy (DuplicatesAction): Policy applied to conflicting short names.

  Returns:
      str: The rewritten source code (unchanged if nothing was found).
  """
  return HoistEngine().hoist(code, mode=mode, line=line, column=column, policy=policy).code


def organize(
  code: str,
  sort_type: SortType = SortType.ALPHABETIC,
  group_type: GroupType = GroupType.SEPARATE_DEPENDENCIES,
  separate_wildcards: bool = True,
) -> str:
  """
  Sorts and groups the import block of a string of Haxe code.

  Args:
      code (str): The source code.
      sort_type (SortType): Ordering to apply.
      group_type (GroupType): Grouping strategy.
      separate_wildcards (bool): Whether wildcard imports get a group of their own.

  Returns:
      str: The reorganized source code.
  """
  return HoistEngine().organize(code, sort_type, group_type, separate_wildcards).code


__all__ = [
  "DuplicatesAction",
  "EditPlan",
  "GroupType",
  "HoistEngine",
  "HoistMode",
  "HoistResult",
  "ImportInventory",
  "ImportMeta",
  "OrganizeResult",
  "SortType",
  "Target",
  "__version__",
  "apply_edits",
  "enumerate_imports",
  "find_conflicts",
  "get_package_root",
  "group_imports",
  "hoist",
  "match_pattern",
  "organize",
  "plan_edits",
  "render_groups",
  "resolve_conflicts",
  "scan_at_cursor",
  "scan_document",
  "scan_line",
  "sort_imports",
]
