"""
Import Inventory Builder.

Parses the import block at the top of a Haxe document into an
``ImportInventory``. Parsing is defensive: a line the grammar does not
understand is skipped rather than reported, because an unusual but harmless
declaration must never prevent a hoist.
"""

import logging
from typing import List, Optional

from haxe_hoister.core.grammar import DEFAULT_GRAMMAR, Grammar
from haxe_hoister.core.types import ImportInventory, ImportMeta

logger = logging.getLogger(__name__)


def enumerate_imports(text: str, grammar: Grammar = DEFAULT_GRAMMAR) -> ImportInventory:
  """
  Builds the import inventory of a document.

  Blank lines and lines matching ``grammar.skip_line`` (package declaration,
  ``using``, conditional compilation, comments) are tolerated before and inside
  the block. The block ends at the first other non-import line.

  Args:
      text: Full document text.
      grammar: Patterns used to classify lines.

  Returns:
      ImportInventory: Unique imports in declaration order plus wildcard modules
      and the line bounds of the block.
  """
  inventory = ImportInventory()

  for index, raw_line in enumerate(text.split("\n")):
    line = raw_line.strip()

    if not grammar.import_line.match(line):
      if not line or grammar.skip_line.match(line):
        if inventory.package_line is None and grammar.package_line.match(line):
          inventory.package_line = index
        continue
      break

    if inventory.first_import_line is None:
      inventory.first_import_line = index

    parts = line.split()
    if "in" in parts:
      # `import a.B in C` is legacy alias syntax, left untouched
      logger.debug(f"Skipping 'in' import on line {index}: {line}")
      continue

    meta = _parse_import(parts, index)
    if meta is None:
      logger.debug(f"Skipping malformed import on line {index}: {line}")
      continue

    if meta.hoisted_path in inventory.unique:
      inventory.redundant_lines.append(index)
      continue

    if inventory.covers(meta):
      if meta.alias == meta.short_name:
        inventory.redundant_lines.append(index)
      continue

    if meta.is_wildcard:
      inventory.wildcards.add(meta.module_name)

    inventory.unique[meta.hoisted_path] = meta
    inventory.last_import_line = index

  return inventory


def _parse_import(parts: List[str], index: int) -> Optional[ImportMeta]:
  """
  Parses the whitespace-separated tokens of one import line.

  Args:
      parts: Tokens, the first being ``import``.
      index: Line index of the declaration.

  Returns:
      Optional[ImportMeta]: The parsed import, or None if the line is malformed.
  """
  if len(parts) < 2:
    return None

  path = parts[1].split(";")[0].strip()
  if not path or path.endswith("."):
    return None

  module_name, _, short_name = path.rpartition(".")

  alias = short_name
  if len(parts) > 2 and not parts[2].startswith((";", "//")):
    if parts[2] != "as" or len(parts) < 4:
      return None
    alias = parts[3].split(";")[0]
    if not alias:
      return None

  return ImportMeta(
    hoisted_path=path,
    module_name=module_name,
    short_name=short_name,
    declaration_line=index,
    alias=alias,
  )


def get_package_root(text: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Optional[str]:
  """
  Extracts the root segment of the document's package.

  ``package com.app.util;`` yields ``com``.

  Args:
      text: Full document text.
      grammar: Patterns used to locate the declaration.

  Returns:
      Optional[str]: The first dotted segment, or None if the document has no
      package declaration or declares the empty package.
  """
  for raw_line in text.split("\n"):
    line = raw_line.strip()
    if not grammar.package_line.match(line):
      continue

    parts = line.split()
    if len(parts) == 1:
      return None

    root = parts[1].split(".")[0].split(";")[0]
    return root or None

  return None
