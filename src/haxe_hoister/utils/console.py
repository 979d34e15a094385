"""
Console and Logging Output.

Command handlers report through ``log_info``/``log_success``/``log_warning``/
``log_error``; the core modules log debug details through their own
``logging.getLogger(__name__)``. Both end up in one ``RichHandler`` on the root
logger, bound to the console currently held by ``console``. That console writes
to stderr by default.

``console`` is a stable module-level object: code imports it once, while
``set_console`` swaps the Rich console behind it (a recording console in tests,
a buffer in editor integrations) and rebinds the logging handler with it.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

HOISTER_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)

_ICONS = {
  logging.INFO: "ℹ️ ",
  SUCCESS_LEVEL_NUM: "✅",
  logging.WARNING: "⚠️ ",
  logging.ERROR: "❌",
}


def _new_console() -> Console:
  # stdout is reserved for rewritten documents
  return Console(theme=HOISTER_THEME, stderr=True)


def _bind_root_logger(target: Console) -> None:
  """Replaces any RichHandler on the root logger with one writing to ``target``."""
  root = logging.getLogger()
  for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
    root.removeHandler(handler)

  root.addHandler(
    RichHandler(
      console=target,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
  )
  root.setLevel(logging.INFO)


class _ConsoleProxy:
  """
  Stable handle on the active Rich console.

  Attribute access falls through to the active console, so ``console.print``,
  ``console.width`` or ``console.export_text`` behave as on a plain ``Console``.
  """

  def __init__(self) -> None:
    self._backend = _new_console()
    _bind_root_logger(self._backend)

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    _bind_root_logger(new_console)

  def reset(self) -> None:
    self.set_backend(_new_console())

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Sends console output and log records to ``new_console``.

  Args:
      new_console (Console): Destination, e.g. ``Console(record=True)``.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores a fresh stderr console."""
  console.reset()


def set_verbose(verbose: bool) -> None:
  """
  Shows or hides the debug records of the core modules.

  Args:
      verbose (bool): True for DEBUG, False for INFO.
  """
  logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)


def _report(level: int, msg: str) -> None:
  logging.log(level, f"{_ICONS[level]} {msg}", extra={"markup": True})


def log_info(msg: str) -> None:
  """
  Reports progress, e.g. a file with nothing to hoist.

  Args:
      msg (str): Message, may contain Rich markup such as ``[path]...[/path]``.
  """
  _report(logging.INFO, msg)


def log_success(msg: str) -> None:
  """Reports a completed rewrite."""
  _report(SUCCESS_LEVEL_NUM, msg)


def log_warning(msg: str) -> None:
  """Reports a file left untouched on purpose, e.g. a cancelled hoist."""
  _report(logging.WARNING, msg)


def log_error(msg: str) -> None:
  """Reports a failure that changes the exit code."""
  _report(logging.ERROR, msg)
