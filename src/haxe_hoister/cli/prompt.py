"""
Interactive Duplicates Prompt.

Asks the user how to treat short names claimed by several full paths. This is
the ``PolicyChooser`` handed to :meth:`HoistEngine.hoist` when neither the
command line nor the configuration fixes a policy.
"""

from typing import List, Optional

from rich.prompt import Prompt
from rich.table import Table

from haxe_hoister.enums import DuplicatesAction
from haxe_hoister.utils.console import console

ACTION_LABELS = {
  DuplicatesAction.SKIP: ("Skip hoisting duplicates", ""),
  DuplicatesAction.FORCE: ("Force hoisting of duplicate modules", "Some of the data will be lost"),
  DuplicatesAction.ALIAS: ("Automatically assign aliases to all duplicates", ""),
}


def ask_duplicates_action(conflicts: List[str]) -> Optional[DuplicatesAction]:
  """
  Prompts for a duplicates policy.

  Args:
      conflicts: Conflicting short names, shown to the user.

  Returns:
      Optional[DuplicatesAction]: The chosen policy, or None if the prompt was dismissed.
  """
  names = ", ".join(f'"{name}"' for name in conflicts)

  table = Table(title=f"Please pick an action for conflicts (for classes {names})")
  table.add_column("Choice", style="code")
  table.add_column("Action")
  table.add_column("Note", style="warning")
  for action, (label, note) in ACTION_LABELS.items():
    table.add_row(action.value, label, note)
  console.print(table)

  try:
    choice = Prompt.ask(
      "Action",
      choices=[action.value for action in DuplicatesAction],
      default=DuplicatesAction.SKIP.value,
      console=console.backend,
    )
  except (KeyboardInterrupt, EOFError):
    return None

  return DuplicatesAction(choice)
