"""
Runtime Configuration Store.

Settings are read from the ``[tool.haxe_hoister]`` table of the nearest
``pyproject.toml`` or from a top-level table in the nearest ``.hoister.toml``,
then overridden by explicit arguments (usually CLI flags).
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, field_validator

from haxe_hoister.enums import DuplicatesAction, GroupType, SortType

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

E = TypeVar("E", bound=Enum)

CONFIG_SECTION = "haxe_hoister"
DEDICATED_CONFIG = ".hoister.toml"


def match_value_to_enum(value: Any, enum_cls: Type[E], key: str) -> E:
  """
  Normalizes a raw configuration value into an enum member.

  Args:
      value: Raw value (enum member or string, case-insensitive).
      enum_cls: Target enumeration.
      key: Configuration key, used in the error message.

  Returns:
      E: The matching member.

  Raises:
      ValueError: If the value names no member.
  """
  if isinstance(value, enum_cls):
    return value
  cleaned = str(value).strip().lower()
  for member in enum_cls:
    if member.value == cleaned:
      return member
  allowed = ", ".join(m.value for m in enum_cls)
  raise ValueError(f"Configuration value for `{key}` is invalid: '{value}'. Expected one of: {allowed}")


class HoisterConfig(BaseModel):
  """
  Configuration consumed by the hoist and organize commands.
  """

  import_sorting_type: SortType = Field(SortType.ALPHABETIC, description="Ordering of organized imports.")
  import_separation_type: GroupType = Field(
    GroupType.SEPARATE_DEPENDENCIES,
    description="Grouping of organized imports.",
  )
  import_separate_wildcards: bool = Field(True, description="Put wildcard imports in a group of their own.")
  duplicates_action: Optional[DuplicatesAction] = Field(
    None,
    description="Policy for conflicting short names. None asks interactively.",
  )

  @field_validator("import_sorting_type", mode="before")
  @classmethod
  def validate_sorting(cls, v: Any) -> SortType:
    """
    Accepts sort types case-insensitively.

    Args:
        v (Any): Raw value.

    Returns:
        SortType: The parsed member.
    """
    return match_value_to_enum(v, SortType, "import_sorting_type")

  @field_validator("import_separation_type", mode="before")
  @classmethod
  def validate_separation(cls, v: Any) -> GroupType:
    """
    Accepts group types case-insensitively.

    Args:
        v (Any): Raw value.

    Returns:
        GroupType: The parsed member.
    """
    return match_value_to_enum(v, GroupType, "import_separation_type")

  @field_validator("duplicates_action", mode="before")
  @classmethod
  def validate_duplicates(cls, v: Any) -> Optional[DuplicatesAction]:
    """
    Accepts duplicates policies case-insensitively; empty means ask.

    Args:
        v (Any): Raw value.

    Returns:
        Optional[DuplicatesAction]: The parsed member, or None.
    """
    if v is None or (isinstance(v, str) and not v.strip()):
      return None
    return match_value_to_enum(v, DuplicatesAction, "duplicates_action")

  @classmethod
  def load(
    cls,
    sort_type: Optional[str] = None,
    group_type: Optional[str] = None,
    separate_wildcards: Optional[bool] = None,
    duplicates_action: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "HoisterConfig":
    """
    Loads configuration from TOML and overrides with explicit arguments.

    Args:
        sort_type (Optional[str]): Override for the sort type.
        group_type (Optional[str]): Override for the group type.
        separate_wildcards (Optional[bool]): Override for wildcard separation.
        duplicates_action (Optional[str]): Override for the duplicates policy.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        HoisterConfig: The fully resolved configuration object.

    Raises:
        pydantic.ValidationError: If a value is not recognised.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = dict(toml_config)
    overrides = {
      "import_sorting_type": sort_type,
      "import_separation_type": group_type,
      "import_separate_wildcards": separate_wildcards,
      "duplicates_action": duplicates_action,
    }
    for key, value in overrides.items():
      if value is not None:
        values[key] = value

    known = {k: v for k, v in values.items() if k in cls.model_fields}
    return cls(**known)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for a configuration file and extracts settings.

  In each directory ``.hoister.toml`` is preferred over ``pyproject.toml``.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    dedicated = parent / DEDICATED_CONFIG
    if dedicated.is_file():
      with open(dedicated, "rb") as f:
        return tomllib.load(f), parent

    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      section = data.get("tool", {}).get(CONFIG_SECTION)
      if section is not None:
        return section, parent

  return {}, None
