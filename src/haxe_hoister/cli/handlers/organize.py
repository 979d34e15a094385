"""
Organize Command Handler.

Implements ``haxe-hoister organize``: sorts and groups the import block of
Haxe files according to the configured sort and group types.
"""

from pathlib import Path
from typing import Optional

from haxe_hoister.cli.handlers.output import collect_sources, emit, read_source, resolve_destination
from haxe_hoister.config import HoisterConfig
from haxe_hoister.core.engine import HoistEngine
from haxe_hoister.utils.console import log_error, log_info, log_success


def handle_organize(
  input_path: Path,
  sort_type: Optional[str],
  group_type: Optional[str],
  separate_wildcards: Optional[bool],
  output_path: Optional[Path],
  in_place: bool,
) -> int:
  """
  Handles the 'organize' command execution.

  Args:
      input_path: Haxe file or directory.
      sort_type: Sort type override.
      group_type: Group type override.
      separate_wildcards: Wildcard separation override.
      output_path: Destination file or directory.
      in_place: Rewrite the input files.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  if input_path.is_dir() and not (output_path or in_place):
    log_error("Directory input requires --out or --in-place.")
    return 1

  try:
    config = HoisterConfig.load(
      sort_type=sort_type,
      group_type=group_type,
      separate_wildcards=separate_wildcards,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  engine = HoistEngine()
  failures = 0

  for source in collect_sources(input_path):
    text = read_source(source)
    if text is None:
      failures += 1
      continue

    result = engine.organize(
      text,
      sort_type=config.import_sorting_type,
      group_type=config.import_separation_type,
      separate_wildcards=config.import_separate_wildcards,
    )

    destination = resolve_destination(source, input_path, output_path, in_place)
    if not result.changed:
      log_info(f"Imports already organized in [path]{source}[/path]")
      if destination == source:
        continue

    emit(result.code, source, destination)
    if result.changed:
      log_success(f"Organized [path]{source}[/path] into {len(result.groups)} groups")

  return 1 if failures else 0
