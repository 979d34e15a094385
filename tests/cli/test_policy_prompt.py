"""
Tests for the interactive duplicates prompt.

Verifies that:
1. The conflicting names and every choice are displayed.
2. The answer is converted into a DuplicatesAction.
3. Dismissing the prompt yields None.
"""

from unittest.mock import patch

from haxe_hoister.cli.prompt import ACTION_LABELS, ask_duplicates_action
from haxe_hoister.enums import DuplicatesAction


def test_prompt_returns_choice(log_console):
  with patch("haxe_hoister.cli.prompt.Prompt.ask", return_value="alias") as mock_ask:
    assert ask_duplicates_action(["Baz", "Bar"]) is DuplicatesAction.ALIAS

  kwargs = mock_ask.call_args.kwargs
  assert kwargs["choices"] == ["skip", "force", "alias"]
  assert kwargs["default"] == "skip"

  output = log_console.export_text()
  assert '"Baz", "Bar"' in output
  assert "Some of the data will be lost" in output


def test_prompt_dismissed(log_console):
  with patch("haxe_hoister.cli.prompt.Prompt.ask", side_effect=KeyboardInterrupt):
    assert ask_duplicates_action(["Baz"]) is None

  with patch("haxe_hoister.cli.prompt.Prompt.ask", side_effect=EOFError):
    assert ask_duplicates_action(["Baz"]) is None


def test_every_action_has_a_label():
  assert set(ACTION_LABELS) == set(DuplicatesAction)
