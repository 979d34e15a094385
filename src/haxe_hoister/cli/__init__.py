"""
CLI Subpackage.

Contains the application entry-points and command handlers for the command-line interface.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Top-level facade for command handlers.
    - ``prompt``: Interactive choice of the duplicates policy.
    - ``handlers/*``: Implementation modules for the hoist and organize commands.
"""
