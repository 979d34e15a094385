"""
Import Sort/Group Engine.

Reorders the parsed import block and renders it as grouped declarations.

Reorganising a document takes two sequential batches, because the second one
has to be computed against the text produced by the first:

1.  ``plan_removal``: delete every parsed import line.
2.  ``plan_regroup``: drop the blank lines left at the head of the block and
    insert the rendered groups there.
"""

from typing import List, Optional

from haxe_hoister.core.edits import EditPlan, Insertion, LineDeletion
from haxe_hoister.core.types import ImportInventory, ImportMeta
from haxe_hoister.enums import GroupType, SortType


def sort_imports(inventory: ImportInventory, sort_type: SortType = SortType.ALPHABETIC) -> List[ImportMeta]:
  """
  Orders the unique imports of an inventory.

  ``ALPHABETIC`` puts wildcard imports strictly first, then orders each tier by
  full path. ``NONE`` keeps the declaration order.

  Args:
      inventory: Parsed imports.
      sort_type: Ordering to apply.

  Returns:
      List[ImportMeta]: The ordered imports.
  """
  imports = list(inventory.unique.values())
  if SortType(sort_type) is SortType.NONE:
    return imports
  return sorted(imports, key=lambda meta: (not meta.is_wildcard, meta.hoisted_path))


def _is_internal(meta: ImportMeta, package_root: str) -> bool:
  return meta.module_name == package_root or meta.module_name.startswith(f"{package_root}.")


def group_imports(
  imports: List[ImportMeta],
  package_root: Optional[str],
  separate_wildcards: bool,
  group_type: GroupType,
) -> List[List[ImportMeta]]:
  """
  Splits ordered imports into groups, preserving their order within each group.

  With ``SEPARATE_DEPENDENCIES`` and a known package root the groups are:
  wildcards (when separated), external modules, then modules of the document's
  own package. Otherwise everything is one group, or wildcards and the rest
  when ``separate_wildcards`` is set.

  Args:
      imports: Imports as returned by :func:`sort_imports`.
      package_root: First segment of the document's package, if any.
      separate_wildcards: Whether wildcard imports get a group of their own.
      group_type: Grouping strategy.

  Returns:
      List[List[ImportMeta]]: Groups in output order; some may be empty.
  """
  if GroupType(group_type) is GroupType.SEPARATE_DEPENDENCIES and package_root:
    wildcards: List[ImportMeta] = []
    external: List[ImportMeta] = []
    internal: List[ImportMeta] = []

    for meta in imports:
      if separate_wildcards and meta.is_wildcard:
        wildcards.append(meta)
      elif not _is_internal(meta, package_root):
        external.append(meta)
      else:
        internal.append(meta)

    return [wildcards, external, internal]

  if not separate_wildcards:
    return [list(imports)]

  return [
    [meta for meta in imports if meta.is_wildcard],
    [meta for meta in imports if not meta.is_wildcard],
  ]


def render_groups(groups: List[List[ImportMeta]]) -> str:
  """
  Renders groups as declaration lines, each non-empty group followed by a blank line.

  Args:
      groups: Output of :func:`group_imports`.

  Returns:
      str: The import block text.
  """
  chunks: List[str] = []
  for group in groups:
    if not group:
      continue
    chunks.extend(f"import {meta.import_spec};\n" for meta in group)
    chunks.append("\n")
  return "".join(chunks)


def plan_removal(inventory: ImportInventory) -> EditPlan:
  """
  First batch: deletes every parsed import line, redundant duplicates included.

  Args:
      inventory: Parsed imports of the current text.

  Returns:
      EditPlan: Whole-line deletions in ascending order.
  """
  lines = {meta.declaration_line for meta in inventory.unique.values() if meta.declaration_line is not None}
  lines.update(inventory.redundant_lines)
  return EditPlan(deletions=[LineDeletion(start_line=line, end_line=line + 1) for line in sorted(lines)])


def plan_regroup(text: str, first_line: int, groups: List[List[ImportMeta]]) -> EditPlan:
  """
  Second batch: clears blank lines at ``first_line`` and inserts the rendered groups there.

  Args:
      text: The document after :func:`plan_removal` was applied.
      first_line: Line index where the import block started.
      groups: Output of :func:`group_imports`.

  Returns:
      EditPlan: Blank-line deletions plus one insertion.
  """
  plan = EditPlan()
  lines = text.split("\n")

  end = first_line
  while end < len(lines) and not lines[end].strip():
    end += 1
  # a trailing empty string is the end of the document, not a blank line
  if end == len(lines) and end > first_line and text.endswith("\n"):
    end -= 1
  if end > first_line:
    plan.deletions.append(LineDeletion(start_line=first_line, end_line=end))

  block = render_groups(groups)
  if block:
    plan.insertions.append(Insertion(line=first_line, text=block))
  return plan
