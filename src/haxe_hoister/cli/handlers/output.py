"""
Shared input/output helpers for the command handlers.

Resolves which ``.hx`` files a command operates on and where each result is
written: next to nothing (stdout), over the input (``--in-place``) or under an
output path mirroring the input layout (``--out``).
"""

from pathlib import Path
from typing import List, Optional

from haxe_hoister.utils.console import log_error, log_success

HAXE_SUFFIX = ".hx"


def collect_sources(input_path: Path) -> List[Path]:
  """
  Lists the Haxe files addressed by ``input_path``.

  Args:
      input_path: A file, or a directory searched recursively for ``*.hx``.

  Returns:
      List[Path]: Files in a stable order.
  """
  if input_path.is_file():
    return [input_path]
  return sorted(p for p in input_path.rglob(f"*{HAXE_SUFFIX}") if p.is_file())


def resolve_destination(source: Path, input_path: Path, output_path: Optional[Path], in_place: bool) -> Optional[Path]:
  """
  Computes where the result for ``source`` goes.

  Args:
      source: The file being processed.
      input_path: The path given on the command line.
      output_path: ``--out`` value, a file for file input or a directory for directory input.
      in_place: ``--in-place`` flag.

  Returns:
      Optional[Path]: Destination file, or None to print to stdout.
  """
  if output_path:
    if input_path.is_dir():
      return output_path / source.relative_to(input_path)
    return output_path
  if in_place:
    return source
  return None


def emit(code: str, source: Path, destination: Optional[Path]) -> None:
  """
  Writes a result to its destination, or prints it when there is none.

  Args:
      code: The edited document.
      source: The file it was read from.
      destination: Output file, or None for stdout.
  """
  if destination is None:
    print(code, end="")
    return
  destination.parent.mkdir(parents=True, exist_ok=True)
  with open(destination, "wt", encoding="utf-8") as f:
    f.write(code)
  if destination != source:
    log_success(f"Wrote [path]{source}[/path] -> [path]{destination}[/path]")


def read_source(source: Path) -> Optional[str]:
  """
  Reads a Haxe file with newlines normalized to ``\n``.

  Args:
      source: File to read.

  Returns:
      Optional[str]: The text, or None if the file could not be read.
  """
  try:
    with open(source, "rt", encoding="utf-8") as f:
      return f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {source}: {e}")
    return None
