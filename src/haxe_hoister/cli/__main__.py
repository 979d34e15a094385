"""
Main Entry Point for haxe-hoister CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `haxe_hoister.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from haxe_hoister import __version__
from haxe_hoister.cli import commands
from haxe_hoister.enums import DuplicatesAction, GroupType, HoistMode, SortType
from haxe_hoister.utils.console import set_verbose


def _add_output_arguments(cmd: argparse.ArgumentParser) -> None:
  output = cmd.add_mutually_exclusive_group()
  output.add_argument("--out", type=Path, default=None, help="Output destination (file or dir)")
  output.add_argument("--in-place", action="store_true", help="Rewrite the input files")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="haxe-hoister: Hoist fully-qualified Haxe types into imports")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output of the core engine")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: HOIST ---
  cmd_hoist = subparsers.add_parser("hoist", help="Replace fully-qualified types with imports")
  cmd_hoist.add_argument("path", type=Path, help="Input Haxe file or directory")
  cmd_hoist.add_argument(
    "--mode",
    choices=[m.value for m in HoistMode],
    default=HoistMode.FILE.value,
    help="Reference under the cursor, the cursor line, or the whole file (default: file)",
  )
  cmd_hoist.add_argument("--line", type=int, default=1, help="1-based cursor line")
  cmd_hoist.add_argument("--column", type=int, default=1, help="1-based cursor column")
  cmd_hoist.add_argument(
    "--policy",
    default=None,
    choices=[a.value for a in DuplicatesAction],
    help="Policy for conflicting short names (default: from toml, else ask)",
  )
  _add_output_arguments(cmd_hoist)

  # --- Command: ORGANIZE ---
  cmd_org = subparsers.add_parser("organize", help="Sort and group the import block")
  cmd_org.add_argument("path", type=Path, help="Input Haxe file or directory")
  cmd_org.add_argument("--sort", default=None, help=f"Sort type: {', '.join(s.value for s in SortType)}")
  cmd_org.add_argument("--group", default=None, help=f"Group type: {', '.join(g.value for g in GroupType)}")
  cmd_org.add_argument(
    "--separate-wildcards",
    action=argparse.BooleanOptionalAction,
    default=None,
    help="Put wildcard imports in a group of their own (default: from toml)",
  )
  _add_output_arguments(cmd_org)

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "hoist":
    return commands.handle_hoist(
      args.path, HoistMode(args.mode), args.line, args.column, args.policy, args.out, args.in_place
    )

  elif args.command == "organize":
    return commands.handle_organize(
      args.path, args.sort, args.group, args.separate_wildcards, args.out, args.in_place
    )

  return 0


if __name__ == "__main__":
  sys.exit(main())
