"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A factory fixture writing Haxe documents into a temporary project.
- Console isolation so tests capturing log output do not leak handlers.
"""

import io
import sys
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

# Add src to path so we can import 'haxe_hoister' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from haxe_hoister.utils.console import HOISTER_THEME, reset_console, set_console  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_text() -> Callable[[str], str]:
  """Reads a document from ``tests/fixtures``."""

  def _read(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")

  return _read


@pytest.fixture
def haxe_file(tmp_path) -> Callable[..., Path]:
  """
  Writes a Haxe document under ``tmp_path`` and returns its path.
  """

  def _write(content: str, name: str = "Main.hx") -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path

  return _write


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console and logging point to stderr before and after every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def log_console() -> Console:
  """
  Routes console and logging output to a wide recording console.

  Read it back with ``log_console.export_text()``.
  """
  recorder = Console(record=True, width=400, file=io.StringIO(), theme=HOISTER_THEME)
  set_console(recorder)
  return recorder
