"""
Data Structures for Import Hoisting.

Defines the records exchanged between the scanner, the inventory builder, the
conflict resolver and the planners:

- ``ImportMeta``: one declared (or to-be-declared) import.
- ``Target``: a fully-qualified reference found in the text, not yet resolved.
- ``ImportInventory``: the parsed import block of one document snapshot.
- ``ConflictGroup``: every full path competing for one short name.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

WILDCARD = "*"


@dataclass
class ImportMeta:
  """
  A single import, either parsed from the document or about to be emitted.

  Attributes:
      hoisted_path: Full dotted path (e.g. ``a.b.C``).
      module_name: Path without the terminal segment (e.g. ``a.b``).
      short_name: Terminal segment, the local identifier (e.g. ``C``).
      declaration_line: Line index of the declaration, set only for imports already in the text.
      enum_value: Trailing constant segment of a reference (e.g. ``VALUE`` in ``a.b.C.VALUE``).
      alias: Local name overriding ``short_name``.
  """

  hoisted_path: str
  module_name: str
  short_name: str
  declaration_line: Optional[int] = None
  enum_value: Optional[str] = None
  alias: Optional[str] = None

  @property
  def local_name(self) -> str:
    """The identifier this import binds in the document."""
    return self.alias if self.alias else self.short_name

  @property
  def import_spec(self) -> str:
    """
    Text following the ``import`` keyword.

    Returns:
        str: ``a.b.C`` or ``a.b.C as Alias`` when the alias differs from the short name.
    """
    if self.alias and self.alias != self.short_name:
      return f"{self.hoisted_path} as {self.alias}"
    return self.hoisted_path

  @property
  def is_wildcard(self) -> bool:
    return self.short_name == WILDCARD

  @property
  def is_declared(self) -> bool:
    """True if the import already exists in the document."""
    return self.declaration_line is not None


@dataclass
class Target(ImportMeta):
  """
  A fully-qualified reference discovered by the scanner.

  ``line_number``, ``start_index`` and ``replace_length`` locate the exact span
  (path plus optional enum segment) replaced by the local name.
  """

  line_number: int = 0
  start_index: int = 0
  replace_length: int = 0

  @property
  def replacement_text(self) -> str:
    """Text written over the original span."""
    if self.enum_value:
      return f"{self.local_name}.{self.enum_value}"
    return self.local_name


@dataclass
class ImportInventory:
  """
  Parsed state of a document's existing import block.

  Attributes:
      unique: Imports keyed by full path, in declaration order.
      wildcards: Modules imported with ``.*``.
      first_import_line: Line index of the first import, None when there is none.
      last_import_line: Line index of the last accepted import, None when there is none.
      package_line: Line index of the ``package`` declaration, if any.
      redundant_lines: Lines holding exact duplicates of an earlier import.
  """

  unique: Dict[str, ImportMeta] = field(default_factory=dict)
  wildcards: Set[str] = field(default_factory=set)
  first_import_line: Optional[int] = None
  last_import_line: Optional[int] = None
  package_line: Optional[int] = None
  redundant_lines: List[int] = field(default_factory=list)

  @property
  def is_empty(self) -> bool:
    return not self.unique

  @property
  def insert_line(self) -> int:
    """
    Line index where new import declarations are inserted.

    Directly below the last import, else below the package declaration,
    else at the top of the document.
    """
    if self.last_import_line is not None:
      return self.last_import_line + 1
    if self.package_line is not None:
      return self.package_line + 1
    return 0

  def covers(self, meta: ImportMeta) -> bool:
    """True if a wildcard import already brings ``meta`` into scope."""
    return meta.module_name in self.wildcards


@dataclass
class ConflictGroup:
  """
  All full paths sharing ``short_name`` within one hoist batch.

  Members are copies owned by the group; aliases assigned to them never touch
  the inventory or the targets directly.
  """

  short_name: str
  members: List[ImportMeta] = field(default_factory=list)

  @property
  def count(self) -> int:
    return len(self.members)

  @property
  def has_conflict(self) -> bool:
    return self.count > 1

  def member_for(self, hoisted_path: str) -> Optional[ImportMeta]:
    for member in self.members:
      if member.hoisted_path == hoisted_path:
        return member
    return None
