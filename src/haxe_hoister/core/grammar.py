"""
Token Grammar Definitions.

The scanner and the inventory builder never reach for module-level regular
expressions directly. They receive a ``Grammar`` instance (``DEFAULT_GRAMMAR``
unless a caller provides another), which is immutable and carries no scan
position.

Reference grammar::

    boundary  := start-of-line | ':' | '<' | ',' | '(' | '=' | 'new'
    metadata  := '@' [':'] identifier whitespace
    module    := lower-segment ('.' lower-segment)*
    reference := boundary ws* metadata? module '.' Short ('.' ENUM)? ws* terminator
    ENUM      := upper-case name of two or more characters
    terminator:= '(' | ')' | ',' | '>' | ';' | '=' | '{' | end-of-line
"""

import re
from dataclasses import dataclass
from typing import Pattern

NEW_KEYWORD = "new"


@dataclass(frozen=True)
class Grammar:
  """
  Compiled patterns used to read Haxe source text.

  Attributes:
      reference: Matches a boundary token followed by a fully-qualified type path.
      boundary: Matches any boundary token on its own (cursor anchoring).
      import_line: Matches a trimmed line that declares an import.
      skip_line: Matches trimmed lines tolerated before/inside the import block.
      package_line: Matches a trimmed ``package`` declaration line.
  """

  reference: Pattern[str]
  boundary: Pattern[str]
  import_line: Pattern[str]
  skip_line: Pattern[str]
  package_line: Pattern[str]


DEFAULT_GRAMMAR = Grammar(
  reference=re.compile(
    r"(?P<boundary>^|[:<,(=]|\bnew\b)"
    r"(?P<gap>\s*)"
    r"(?P<meta>@:?[A-Za-z_]\w*\s+)?"
    r"(?P<path>"
    r"(?P<module>[a-z][0-9a-z_]*(?:\.[a-z][0-9a-z_]*)*)"
    r"\.(?P<short>[A-Z_]\w*)"
    r"(?:\.(?P<enum>[A-Z_][A-Z0-9_]+))?"
    r")"
    r"\s*(?P<terminator>[(),>;={]|$)"
  ),
  boundary=re.compile(r"[:<,(=]|\bnew\b"),
  import_line=re.compile(r"^import\b"),
  # package declarations, `using`, conditional compilation and comments
  skip_line=re.compile(r"^(?:package\b|using\b|#|/|\*)"),
  package_line=re.compile(r"^package\b"),
)
