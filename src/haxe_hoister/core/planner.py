"""
Edit Planner.

Turns resolved targets into an ``EditPlan``: one replacement per target and
one import insertion per distinct declaration the document still lacks.
"""

from typing import List, Set

from haxe_hoister.core.edits import EditPlan, Insertion, Replacement
from haxe_hoister.core.types import ImportInventory, Target


def plan_edits(targets: List[Target], inventory: ImportInventory) -> EditPlan:
  """
  Plans the replacements and import insertions for resolved targets.

  A target needs no new declaration when the document already imports its
  full path, when a wildcard import covers its module, or when an identical
  declaration was already planned in this batch. Such targets are counted as
  skipped.

  Args:
      targets: Targets after conflict resolution.
      inventory: Parsed imports of the same snapshot.

  Returns:
      EditPlan: Replacements in target order, then insertions at ``inventory.insert_line``.
  """
  plan = EditPlan()

  for target in targets:
    plan.replacements.append(
      Replacement(
        line=target.line_number,
        start=target.start_index,
        length=target.replace_length,
        text=target.replacement_text,
      )
    )

  planned: Set[str] = set()
  insert_line = inventory.insert_line

  for target in targets:
    spec = target.import_spec
    if target.hoisted_path in inventory.unique or inventory.covers(target) or spec in planned:
      plan.imports_skipped += 1
      continue

    planned.add(spec)
    plan.insertions.append(Insertion(line=insert_line, text=f"import {spec};\n"))
    plan.imports_inserted += 1

  return plan
