"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers and the verbosity switch.
"""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from haxe_hoister.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_verbose,
)


def test_console_singleton_proxy():
  """
  Verify `console` acts as a proxy to a real Rich console.
  """
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(console.backend, Console)


def test_custom_console_injection():
  """
  Verify we can inject a capturing console and retrieve logs.
  This is how editor integrations read back what a command reported.
  """
  capture_console = Console(record=True, file=io.StringIO(), width=200)
  set_console(capture_console)

  log_info("Captured Log")
  log_success("Done")

  output = capture_console.export_text()

  assert "Captured Log" in output
  assert "ℹ️" in output
  assert "✅ Done" in output


def test_reset_functionality():
  original_backend = console.backend

  temp = Console()
  set_console(temp)
  assert console.backend is temp

  reset_console()
  current = console.backend

  assert current is not temp
  assert current is not original_backend
  assert isinstance(current, Console)


def test_logging_wrappers_format(capsys):
  """
  Verify semantic wrappers prefix their messages.
  Note: We rely on capsys capturing stderr from the default console.
  """
  reset_console()

  log_warning("WarnText")
  log_error("ErrorText")

  captured = capsys.readouterr()

  assert "WarnText" in captured.err
  assert "ErrorText" in captured.err
  assert "⚠️" in captured.err
  assert "❌" in captured.err
  assert captured.out == ""


def test_success_level_name():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_verbose_switch(log_console):
  core_logger = logging.getLogger("haxe_hoister.core.scanner")

  core_logger.debug("hidden detail")
  set_verbose(True)
  core_logger.debug("visible detail")
  set_verbose(False)

  output = log_console.export_text()
  assert "hidden detail" not in output
  assert "visible detail" in output


def test_single_rich_handler_after_swaps():
  set_console(Console(file=io.StringIO()))
  set_console(Console(file=io.StringIO()))

  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1


def test_proxy_getattr_delegation():
  width = console.width
  assert isinstance(width, int)
  assert width > 0
