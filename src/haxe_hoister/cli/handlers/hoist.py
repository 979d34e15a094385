"""
Hoist Command Handler.

Implements ``haxe-hoister hoist``: replaces fully-qualified type references
with short names and adds the matching import declarations.
"""

from pathlib import Path
from typing import Optional

from haxe_hoister.cli.handlers.output import collect_sources, emit, read_source, resolve_destination
from haxe_hoister.cli.prompt import ask_duplicates_action
from haxe_hoister.config import HoisterConfig
from haxe_hoister.core.engine import HoistEngine
from haxe_hoister.enums import HoistMode
from haxe_hoister.utils.console import log_error, log_info, log_success, log_warning


def handle_hoist(
  input_path: Path,
  mode: HoistMode,
  line: int,
  column: int,
  policy: Optional[str],
  output_path: Optional[Path],
  in_place: bool,
) -> int:
  """
  Handles the 'hoist' command execution.

  Args:
      input_path: Haxe file, or directory when hoisting whole files.
      mode: Scope of the hoist.
      line: 1-based cursor line (``current`` and ``line`` modes).
      column: 1-based cursor column (``current`` mode).
      policy: Duplicates policy override; None falls back to the configuration, then to a prompt.
      output_path: Destination file or directory.
      in_place: Rewrite the input files.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  if input_path.is_dir() and mode is not HoistMode.FILE:
    log_error("Directory input requires --mode file.")
    return 1

  if input_path.is_dir() and not (output_path or in_place):
    log_error("Directory input requires --out or --in-place.")
    return 1

  try:
    config = HoisterConfig.load(
      duplicates_action=policy,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  chooser = ask_duplicates_action if config.duplicates_action is None else None
  engine = HoistEngine()
  failures = 0

  for source in collect_sources(input_path):
    text = read_source(source)
    if text is None:
      failures += 1
      continue

    result = engine.hoist(
      text,
      mode=mode,
      line=line - 1,
      column=column - 1,
      policy=config.duplicates_action,
      choose_policy=chooser,
    )

    destination = resolve_destination(source, input_path, output_path, in_place)
    if result.found == 0 or result.cancelled:
      if result.found == 0:
        log_info(f"No hoistable imports found in [path]{source}[/path]")
      else:
        log_warning(f"Hoist cancelled for [path]{source}[/path]")
      # untouched text still reaches stdout or the --out tree
      if destination != source:
        emit(text, source, destination)
      continue

    emit(result.code, source, destination)
    log_success(f"[path]{source}[/path]: {result.summary}")

  return 1 if failures else 0
