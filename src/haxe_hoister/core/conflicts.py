"""
Conflict Resolution Logic.

Detects short-name collisions between newly discovered targets and the
existing import inventory, assigns numbered aliases (``Baz_1``, ``Baz_2``...)
and applies the selected ``DuplicatesAction`` to the targets.

Numbering is stable: aliases already present in the document (``import
a.Baz as Baz_1``) are honoured and new numbers continue after the highest one,
so re-running a hoist on an unchanged document does not renumber anything.
"""

import logging
import re
from typing import Dict, List, Optional

from haxe_hoister.core.types import ConflictGroup, ImportInventory, ImportMeta, Target
from haxe_hoister.enums import DuplicatesAction

logger = logging.getLogger(__name__)

ConflictGroups = Dict[str, ConflictGroup]


def find_conflicts(targets: List[Target], inventory: ImportInventory) -> ConflictGroups:
  """
  Groups targets and existing imports by short name and numbers the collisions.

  Only targets open groups; an existing import joins a group when at least one
  target shares its short name. Within a group, entries are unique by full
  path, an aliased entry replacing an unaliased one.

  Args:
      targets: References found by the scanner.
      inventory: Parsed imports of the same document.

  Returns:
      ConflictGroups: Groups keyed by short name, including groups without a
      real conflict (``count == 1``).
  """
  groups: ConflictGroups = {}

  for target in targets:
    group = groups.setdefault(target.short_name, ConflictGroup(short_name=target.short_name))
    _add_member(group, target)

  for existing in inventory.unique.values():
    group = groups.get(existing.short_name)
    if group is not None:
      _add_member(group, existing)

  for group in groups.values():
    if group.has_conflict:
      _assign_aliases(group, inventory)

  return groups


def conflicting_names(groups: ConflictGroups) -> List[str]:
  """Short names of the groups that hold more than one full path."""
  return [name for name, group in groups.items() if group.has_conflict]


def _add_member(group: ConflictGroup, meta: ImportMeta) -> None:
  for index, member in enumerate(group.members):
    if member.hoisted_path != meta.hoisted_path:
      continue
    if not member.alias and meta.alias:
      group.members[index] = _as_member(meta)
    return
  group.members.append(_as_member(meta))


def _as_member(meta: ImportMeta) -> ImportMeta:
  # Plain ImportMeta copy, detached from the target's position fields
  return ImportMeta(
    hoisted_path=meta.hoisted_path,
    module_name=meta.module_name,
    short_name=meta.short_name,
    declaration_line=meta.declaration_line,
    alias=meta.alias,
  )


def _alias_number(short_name: str, alias: Optional[str]) -> Optional[int]:
  if not alias:
    return None
  match = re.fullmatch(rf"{re.escape(short_name)}_(\d+)", alias)
  return int(match.group(1)) if match else None


def _assign_aliases(group: ConflictGroup, inventory: ImportInventory) -> None:
  """
  Numbers the unaliased members of a conflicting group.

  Members covered by a wildcard import keep their short name but, when no
  numbered alias exists yet, each still consumes one number.
  """
  numbers = [n for n in (_alias_number(group.short_name, m.alias) for m in group.members) if n is not None]

  if numbers:
    next_number = max(numbers) + 1
  else:
    next_number = 1 + sum(1 for m in group.members if inventory.covers(m))

  for member in group.members:
    if inventory.covers(member) or member.alias:
      continue
    member.alias = f"{group.short_name}_{next_number}"
    next_number += 1
    logger.debug(f"Assigned alias {member.alias} to {member.hoisted_path}")


def resolve_conflicts(
  targets: List[Target],
  inventory: ImportInventory,
  groups: ConflictGroups,
  policy: DuplicatesAction,
) -> int:
  """
  Applies a duplicates policy to the targets, in place.

  - ``SKIP``: adopt the alias of an import of the same path already declared in
    the document; otherwise drop the target if its short name is contested.
  - ``ALIAS``: adopt the alias the group holds for the target's path, unless a
    wildcard import already covers the target.
  - ``FORCE``: leave every target untouched.

  Args:
      targets: Targets to resolve; dropped targets are removed from this list.
      inventory: Parsed imports of the document.
      groups: Result of :func:`find_conflicts` for the same targets.
      policy: The duplicates policy chosen by the caller.

  Returns:
      int: Number of targets dropped.
  """
  policy = DuplicatesAction(policy)
  dropped: List[int] = []

  for index, target in enumerate(targets):
    group = groups.get(target.short_name)
    if group is None:
      continue
    member = group.member_for(target.hoisted_path)

    if policy is DuplicatesAction.SKIP:
      if member is not None and member.is_declared:
        target.alias = member.alias
      elif group.has_conflict:
        dropped.append(index)

    elif policy is DuplicatesAction.ALIAS:
      if not inventory.covers(target) and member is not None and member.alias:
        target.alias = member.alias

  if dropped:
    logger.debug(f"Skipping {len(dropped)} conflicting references")
    skip = set(dropped)
    targets[:] = [target for index, target in enumerate(targets) if index not in skip]

  return len(dropped)

