"""
Tests for Config Persistence (TOML).

Verifies that:
1. HoisterConfig.load() picks up [tool.haxe_hoister] from pyproject.toml.
2. A dedicated `.hoister.toml` wins over pyproject.toml in the same directory.
3. CLI arguments override TOML settings.
4. Values are matched case-insensitively and invalid ones are rejected.
5. File traversal finds toml in parent directories.
"""

import pytest

from haxe_hoister.config import HoisterConfig, match_value_to_enum
from haxe_hoister.enums import DuplicatesAction, GroupType, SortType


@pytest.fixture
def toml_file(tmp_path):
  """Creates a pyproject.toml with a hoister section in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[project]
name = "game"

[tool.haxe_hoister]
import_sorting_type = "none"
import_separation_type = "clumped"
import_separate_wildcards = false
duplicates_action = "alias"
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults():
  config = HoisterConfig()

  assert config.import_sorting_type is SortType.ALPHABETIC
  assert config.import_separation_type is GroupType.SEPARATE_DEPENDENCIES
  assert config.import_separate_wildcards is True
  assert config.duplicates_action is None


def test_load_from_pyproject(tmp_path, toml_file):
  """
  Scenario: User runs the CLI inside a configured project.
  Expect: Config matches TOML values.
  """
  config = HoisterConfig.load(search_path=tmp_path)

  assert config.import_sorting_type is SortType.NONE
  assert config.import_separation_type is GroupType.CLUMPED
  assert config.import_separate_wildcards is False
  assert config.duplicates_action is DuplicatesAction.ALIAS


def test_cli_overrides_toml(tmp_path, toml_file):
  config = HoisterConfig.load(group_type="separate-deps", duplicates_action="skip", search_path=tmp_path)

  assert config.import_separation_type is GroupType.SEPARATE_DEPENDENCIES
  assert config.duplicates_action is DuplicatesAction.SKIP
  # TOML fallback
  assert config.import_sorting_type is SortType.NONE


def test_false_override_is_applied(tmp_path):
  (tmp_path / ".hoister.toml").write_text("import_separate_wildcards = true\n", encoding="utf-8")

  config = HoisterConfig.load(separate_wildcards=False, search_path=tmp_path)

  assert config.import_separate_wildcards is False


def test_dedicated_file_wins(tmp_path, toml_file):
  (tmp_path / ".hoister.toml").write_text('import_sorting_type = "alphabetic"\n', encoding="utf-8")

  config = HoisterConfig.load(search_path=tmp_path)

  assert config.import_sorting_type is SortType.ALPHABETIC
  # pyproject.toml is not merged in
  assert config.duplicates_action is None


def test_pyproject_without_section_is_passed_over(tmp_path, toml_file):
  """
  Scenario: A nested project has its own pyproject.toml without a hoister section.
  Expect: The search continues to the parent configuration.
  """
  nested = tmp_path / "lib"
  nested.mkdir()
  (nested / "pyproject.toml").write_text('[project]\nname = "lib"\n', encoding="utf-8")

  config = HoisterConfig.load(search_path=nested)

  assert config.duplicates_action is DuplicatesAction.ALIAS


def test_hierarchical_search(tmp_path, toml_file):
  """
  Scenario: Config is in root, but user runs command from src/subdir.
  Expect: Traversing up finds the root pyproject.toml.
  """
  subdir = tmp_path / "src" / "subdir"
  subdir.mkdir(parents=True)

  config = HoisterConfig.load(search_path=subdir)

  assert config.import_separation_type is GroupType.CLUMPED


def test_unknown_keys_are_ignored(tmp_path):
  (tmp_path / ".hoister.toml").write_text('future_option = 3\nimport_sorting_type = "NONE"\n', encoding="utf-8")

  config = HoisterConfig.load(search_path=tmp_path)

  assert config.import_sorting_type is SortType.NONE


def test_invalid_value_rejected(tmp_path):
  (tmp_path / ".hoister.toml").write_text('import_separation_type = "by-author"\n', encoding="utf-8")

  with pytest.raises(ValueError, match="import_separation_type"):
    HoisterConfig.load(search_path=tmp_path)


def test_empty_duplicates_action_means_ask():
  assert HoisterConfig(duplicates_action="").duplicates_action is None


def test_match_value_to_enum():
  assert match_value_to_enum(" Alias ", DuplicatesAction, "duplicates_action") is DuplicatesAction.ALIAS
  assert match_value_to_enum(SortType.NONE, SortType, "import_sorting_type") is SortType.NONE

  with pytest.raises(ValueError, match="Expected one of: none, alphabetic"):
    match_value_to_enum("random", SortType, "import_sorting_type")
