"""
Orchestration Engine for Hoisting and Organizing Imports.

This module wires the core components into the two pipelines exposed to
callers (the CLI, editor integrations, tests):

1.  **Hoist**: scan -> build inventory -> find conflicts -> choose a policy ->
    resolve -> plan -> apply. The policy is either fixed by the caller or
    requested from a ``PolicyChooser`` callback, which is the single point
    where a caller may suspend to ask the user. Returning ``None`` cancels the
    hoist before anything is planned.

2.  **Organize**: build inventory -> sort -> group -> remove the old lines
    (batch 1) -> clear blank lines and insert the regrouped block (batch 2).

Every plan is computed from one snapshot and applied in one batch.
"""

import logging
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from haxe_hoister.core.conflicts import conflicting_names, find_conflicts, resolve_conflicts
from haxe_hoister.core.edits import EditPlan, apply_edits
from haxe_hoister.core.grammar import DEFAULT_GRAMMAR, Grammar
from haxe_hoister.core.inventory import enumerate_imports, get_package_root
from haxe_hoister.core.planner import plan_edits
from haxe_hoister.core.scanner import scan_at_cursor, scan_document, scan_line
from haxe_hoister.core.sorter import group_imports, plan_regroup, plan_removal, sort_imports
from haxe_hoister.core.types import Target
from haxe_hoister.enums import DuplicatesAction, GroupType, HoistMode, SortType

logger = logging.getLogger(__name__)

# Receives the conflicting short names, returns the policy or None to cancel.
PolicyChooser = Callable[[List[str]], Optional[DuplicatesAction]]


class HoistResult(BaseModel):
  """
  Outcome of one hoist invocation.
  """

  code: str = Field(default="", description="The document after the hoist (unchanged if nothing applied).")
  found: int = Field(default=0, description="References found by the scanner.")
  conflicts: List[str] = Field(default_factory=list, description="Short names claimed by several full paths.")
  policy: Optional[DuplicatesAction] = Field(default=None, description="Policy applied to the conflicts.")
  cancelled: bool = Field(default=False, description="True if the policy choice was dismissed.")
  imports_inserted: int = Field(default=0, description="Import declarations created.")
  imports_skipped: int = Field(
    default=0,
    description="References that needed no declaration or were dropped as conflicting.",
  )
  plan: EditPlan = Field(default_factory=EditPlan, description="The applied edit batch.")

  @property
  def changed(self) -> bool:
    return not self.plan.is_empty

  @property
  def summary(self) -> str:
    return f"Created {self.imports_inserted} imports, skipped {self.imports_skipped} already existing, or conflicting."


class OrganizeResult(BaseModel):
  """
  Outcome of one organize invocation.
  """

  code: str = Field(default="", description="The reorganized document.")
  package_root: Optional[str] = Field(default=None, description="Root segment of the document's package.")
  groups: List[List[str]] = Field(default_factory=list, description="Rendered import specs per non-empty group.")
  changed: bool = Field(default=False, description="True if the text differs from the input.")


class HoistEngine:
  """
  Runs the hoist and organize pipelines over document snapshots.

  The engine holds configuration only; each call rebuilds its state from the
  text it receives.
  """

  def __init__(self, grammar: Grammar = DEFAULT_GRAMMAR):
    """
    Initializes the engine.

    Args:
        grammar: Patterns shared by the scanner and the inventory builder.
    """
    self.grammar = grammar

  def scan(self, text: str, mode: HoistMode, line: int = 0, column: int = 0) -> List[Target]:
    """
    Collects the targets of a hoist.

    Args:
        text: Full document text.
        mode: Scope of the scan.
        line: Cursor line (``CURRENT`` and ``LINE``).
        column: Cursor column (``CURRENT``).

    Returns:
        List[Target]: Found references.

    Raises:
        ValueError: If the mode is unknown.
    """
    mode = HoistMode(mode)
    if mode is HoistMode.CURRENT:
      target = scan_at_cursor(text, line, column, self.grammar)
      return [target] if target else []
    if mode is HoistMode.LINE:
      return scan_line(text, line, self.grammar)
    return scan_document(text, self.grammar)

  def hoist(
    self,
    text: str,
    mode: HoistMode = HoistMode.FILE,
    line: int = 0,
    column: int = 0,
    policy: Optional[DuplicatesAction] = None,
    choose_policy: Optional[PolicyChooser] = None,
  ) -> HoistResult:
    """
    Hoists fully-qualified references into imports.

    When conflicts exist and no ``policy`` is given, ``choose_policy`` is asked;
    without a chooser the policy defaults to ``SKIP``.

    Args:
        text: Full document text.
        mode: Scope of the hoist.
        line: Cursor line.
        column: Cursor column.
        policy: Fixed duplicates policy.
        choose_policy: Callback consulted for conflicts when ``policy`` is None.

    Returns:
        HoistResult: The edited text and the counts for reporting.
    """
    result = HoistResult(code=text)

    targets = self.scan(text, mode, line, column)
    result.found = len(targets)
    if not targets:
      logger.debug("No hoistable references found")
      return result

    inventory = enumerate_imports(text, self.grammar)
    groups = find_conflicts(targets, inventory)
    result.conflicts = conflicting_names(groups)

    chosen = DuplicatesAction(policy) if policy else None
    if chosen is None:
      if result.conflicts and choose_policy is not None:
        chosen = choose_policy(result.conflicts)
        if chosen is None:
          result.cancelled = True
          return result
      else:
        chosen = DuplicatesAction.SKIP
    result.policy = chosen

    dropped = resolve_conflicts(targets, inventory, groups, chosen)
    plan = plan_edits(targets, inventory)

    result.plan = plan
    result.imports_inserted = plan.imports_inserted
    result.imports_skipped = plan.imports_skipped + dropped
    result.code = apply_edits(text, plan)
    return result

  def organize(
    self,
    text: str,
    sort_type: SortType = SortType.ALPHABETIC,
    group_type: GroupType = GroupType.SEPARATE_DEPENDENCIES,
    separate_wildcards: bool = True,
  ) -> OrganizeResult:
    """
    Sorts and groups the import block of a document.

    Args:
        text: Full document text.
        sort_type: Ordering to apply.
        group_type: Grouping strategy.
        separate_wildcards: Whether wildcard imports get a group of their own.

    Returns:
        OrganizeResult: The reorganized text and the groups written.
    """
    inventory = enumerate_imports(text, self.grammar)
    package_root = get_package_root(text, self.grammar)
    result = OrganizeResult(code=text, package_root=package_root)

    if inventory.is_empty or inventory.first_import_line is None:
      return result

    ordered = sort_imports(inventory, sort_type)
    groups = group_imports(ordered, package_root, separate_wildcards, group_type)

    stripped = apply_edits(text, plan_removal(inventory))
    code = apply_edits(stripped, plan_regroup(stripped, inventory.first_import_line, groups))

    result.code = code
    result.groups = [[meta.import_spec for meta in group] for group in groups if group]
    result.changed = code != text
    return result
