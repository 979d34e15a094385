"""
Reference Scanner.

Extracts fully-qualified type references (``Target`` records) from raw Haxe
text using the token grammar of :mod:`haxe_hoister.core.grammar`.

Iteration is stateless: ``iter_matches`` is a generator over
``(match, next_offset)`` pairs computed from its arguments only. After each
candidate the search resumes one character before the end of the match, so a
terminator (``,`` in ``Map<a.B,c.D>``) can serve as the boundary of the next
reference.
"""

import logging
from typing import Iterator, List, Match, Optional, Tuple

from haxe_hoister.core.grammar import DEFAULT_GRAMMAR, NEW_KEYWORD, Grammar
from haxe_hoister.core.types import Target

logger = logging.getLogger(__name__)


def iter_matches(text: str, grammar: Grammar = DEFAULT_GRAMMAR, start: int = 0) -> Iterator[Tuple[Match[str], int]]:
  """
  Yields every grammar match in ``text`` along with the offset of the next search.

  Args:
      text: A single line of source text.
      grammar: Patterns used for matching.
      start: Offset to begin searching from.

  Yields:
      Tuple[Match, int]: The raw match and the offset where scanning resumes.
  """
  offset = start
  while offset <= len(text):
    match = grammar.reference.search(text, offset)
    if match is None:
      return
    next_offset = max(match.end() - 1, match.start() + 1)
    yield match, next_offset
    offset = next_offset


def is_accepted(match: Match[str], text: str) -> bool:
  """
  Applies the rejection rules to a raw match.

  A match is rejected when it is a metadata name (``@:some.Meta``) or when it
  is followed by ``(`` without being introduced by ``new`` (a qualified
  function call rather than a type reference).

  Args:
      match: Raw grammar match.
      text: The line the match was found in.

  Returns:
      bool: True if the match denotes a type reference.
  """
  boundary = match.group("boundary")
  boundary_start = match.start("boundary")

  if boundary == ":" and boundary_start > 0 and text[boundary_start - 1] == "@":
    return False

  if match.group("terminator") == "(" and boundary != NEW_KEYWORD:
    return False

  return True


def to_target(match: Match[str], line_number: int) -> Target:
  """
  Converts an accepted match into a ``Target``.

  Args:
      match: Accepted grammar match.
      line_number: Physical line index of the match.

  Returns:
      Target: Reference with its replacement span.
  """
  module_name = match.group("module")
  short_name = match.group("short")
  path = match.group("path")

  return Target(
    hoisted_path=f"{module_name}.{short_name}",
    module_name=module_name,
    short_name=short_name,
    enum_value=match.group("enum"),
    line_number=line_number,
    start_index=match.start("path"),
    replace_length=len(path),
  )


def match_pattern(line_text: str, line_number: int, grammar: Grammar = DEFAULT_GRAMMAR) -> List[Target]:
  """
  Finds every hoistable reference on one line.

  Args:
      line_text: The text of the line.
      line_number: Physical line index, copied into each target.
      grammar: Patterns used for matching.

  Returns:
      List[Target]: Accepted references in order of appearance.
  """
  targets: List[Target] = []
  for match, _ in iter_matches(line_text, grammar):
    if not is_accepted(match, line_text):
      logger.debug(f"Rejected '{match.group('path')}' on line {line_number}")
      continue
    targets.append(to_target(match, line_number))
  return targets


def scan_line(text: str, line_number: int, grammar: Grammar = DEFAULT_GRAMMAR) -> List[Target]:
  """
  Finds every hoistable reference on one line of a document.

  Args:
      text: Full document text.
      line_number: Index of the line to scan.
      grammar: Patterns used for matching.

  Returns:
      List[Target]: Accepted references, empty if the line does not exist.
  """
  lines = text.split("\n")
  if not 0 <= line_number < len(lines):
    return []
  return match_pattern(lines[line_number], line_number, grammar)


def scan_document(text: str, grammar: Grammar = DEFAULT_GRAMMAR) -> List[Target]:
  """
  Finds every hoistable reference in a document, line by line.

  Args:
      text: Full document text.
      grammar: Patterns used for matching.

  Returns:
      List[Target]: Accepted references ordered by line, then by column.
  """
  targets: List[Target] = []
  for line_number, line_text in enumerate(text.split("\n")):
    targets.extend(match_pattern(line_text, line_number, grammar))
  return targets


def scan_at_cursor(text: str, line: int, column: int, grammar: Grammar = DEFAULT_GRAMMAR) -> Optional[Target]:
  """
  Finds the reference introduced by the boundary nearest to the cursor.

  The nearest boundary token starting at or before ``column`` anchors the
  match; the start of the line is used when there is none.

  Args:
      text: Full document text.
      line: Cursor line index.
      column: Cursor column.
      grammar: Patterns used for matching.

  Returns:
      Optional[Target]: The reference, or None if nothing hoistable is anchored there.
  """
  lines = text.split("\n")
  if not 0 <= line < len(lines):
    return None
  line_text = lines[line]

  anchor = 0
  for boundary in grammar.boundary.finditer(line_text):
    if boundary.start() > column:
      break
    anchor = boundary.start()

  match = grammar.reference.match(line_text, anchor)
  if match is None or not is_accepted(match, line_text):
    return None
  return to_target(match, line)
