"""
Entry point for module execution (``python -m haxe_hoister``).

This module delegates execution to the CLI handler in ``haxe_hoister.cli.__main__``.
"""

import sys
from haxe_hoister.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
