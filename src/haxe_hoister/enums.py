"""
Enumerations for haxe-hoister.

This module defines the string-valued enumerations shared by the engine, the
configuration layer and the command line. Values match the configuration keys
accepted in ``pyproject.toml`` and on the CLI.
"""

from enum import Enum


class HoistMode(str, Enum):
  """
  Scope of a hoist invocation.
  """

  CURRENT = "current"  # reference under the cursor
  LINE = "line"  # every reference on the cursor line
  FILE = "file"  # every reference in the document


class DuplicatesAction(str, Enum):
  """
  Policy applied when several full paths share one short name.
  """

  SKIP = "skip"
  FORCE = "force"
  ALIAS = "alias"


class SortType(str, Enum):
  """
  Ordering applied to the import block by the organizer.
  """

  NONE = "none"
  ALPHABETIC = "alphabetic"


class GroupType(str, Enum):
  """
  Grouping applied to the import block by the organizer.
  """

  CLUMPED = "clumped"
  SEPARATE_DEPENDENCIES = "separate-deps"
