"""
Declarative Edit Plans.

The planners never modify text. They return an ``EditPlan`` whose operations
all refer to coordinates of one unmodified snapshot. ``apply_edits`` is the
reference applier used by the CLI and the tests: it applies a whole plan as a
single batch and returns the new text, or raises before producing anything if
an operation does not fit the snapshot.
"""

from typing import Dict, List, Set

from pydantic import BaseModel, Field


class Replacement(BaseModel):
  """Replaces ``length`` characters at (``line``, ``start``) with ``text``."""

  line: int
  start: int
  length: int
  text: str


class Insertion(BaseModel):
  """Inserts ``text`` at the start of line ``line``."""

  line: int
  text: str


class LineDeletion(BaseModel):
  """Deletes the whole lines ``start_line`` up to, but excluding, ``end_line``."""

  start_line: int
  end_line: int


class EditPlan(BaseModel):
  """
  One atomic batch of text operations.
  """

  replacements: List[Replacement] = Field(default_factory=list, description="In-place span rewrites.")
  insertions: List[Insertion] = Field(
    default_factory=list,
    description="Line insertions; several at one line appear in submission order.",
  )
  deletions: List[LineDeletion] = Field(default_factory=list, description="Whole-line deletions.")
  imports_inserted: int = Field(default=0, description="Import declarations added by this plan.")
  imports_skipped: int = Field(default=0, description="Targets that needed no new declaration.")

  @property
  def is_empty(self) -> bool:
    """
    Check if the plan changes nothing.

    Returns:
        True if there are no operations.
    """
    return not (self.replacements or self.insertions or self.deletions)


def apply_edits(text: str, plan: EditPlan) -> str:
  """
  Applies a plan to the snapshot it was computed from.

  Replacements on one line are applied right to left so their columns stay
  valid. Insertions sharing a line keep submission order. Deleted lines drop
  any replacement they contain.

  Args:
      text: The snapshot the plan refers to.
      plan: Operations to apply.

  Returns:
      str: The edited text.

  Raises:
      ValueError: If an operation lies outside the snapshot.
  """
  lines = text.split("\n")

  deleted: Set[int] = set()
  for deletion in plan.deletions:
    if deletion.start_line < 0 or deletion.end_line > len(lines) or deletion.start_line > deletion.end_line:
      raise ValueError(f"Deletion {deletion.start_line}-{deletion.end_line} outside document")
    deleted.update(range(deletion.start_line, deletion.end_line))

  by_line: Dict[int, List[Replacement]] = {}
  for replacement in plan.replacements:
    if not 0 <= replacement.line < len(lines):
      raise ValueError(f"Replacement on line {replacement.line} outside document")
    line_text = lines[replacement.line]
    if replacement.start < 0 or replacement.start + replacement.length > len(line_text):
      raise ValueError(f"Replacement span {replacement.start}+{replacement.length} outside line {replacement.line}")
    by_line.setdefault(replacement.line, []).append(replacement)

  inserts: Dict[int, List[str]] = {}
  for insertion in plan.insertions:
    if insertion.line < 0:
      raise ValueError(f"Insertion on line {insertion.line} outside document")
    inserts.setdefault(min(insertion.line, len(lines)), []).append(insertion.text)

  edited = list(lines)
  for line_number, replacements in by_line.items():
    line_text = edited[line_number]
    for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
      line_text = line_text[: replacement.start] + replacement.text + line_text[replacement.start + replacement.length :]
    edited[line_number] = line_text

  last = len(lines) - 1
  chunks: List[str] = []
  for index, line_text in enumerate(edited):
    chunks.extend(inserts.get(index, []))
    if index in deleted:
      continue
    chunks.append(line_text if index == last else f"{line_text}\n")

  result = "".join(chunks)
  tail = inserts.get(len(lines))
  if tail:
    if result and not result.endswith("\n"):
      result += "\n"
    result += "".join(tail)

  return result
