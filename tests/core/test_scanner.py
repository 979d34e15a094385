"""
Tests for the Reference Scanner.

Verifies that:
1. Type positions (`:`, `<`, `,`, `(`, `=`, `new`) introduce references.
2. Spans cover the path and enum segment exactly.
3. Terminators can serve as the boundary of the next reference.
4. Qualified calls and metadata names are rejected.
5. The cursor variant anchors on the nearest preceding boundary.
"""

from haxe_hoister.core.scanner import iter_matches, match_pattern, scan_at_cursor, scan_document, scan_line


def test_type_annotation_and_constructor():
  """
  Scenario: `var x:foo.bar.Baz = new foo.bar.Baz();`
  Expectation: Both occurrences found, constructor accepted because of `new`.
  """
  line = "var x:foo.bar.Baz = new foo.bar.Baz();"
  targets = match_pattern(line, 4)

  assert [t.hoisted_path for t in targets] == ["foo.bar.Baz", "foo.bar.Baz"]
  assert [t.start_index for t in targets] == [6, 24]
  assert all(t.replace_length == len("foo.bar.Baz") for t in targets)
  assert all(t.line_number == 4 for t in targets)
  assert targets[0].module_name == "foo.bar"
  assert targets[0].short_name == "Baz"


def test_overlapping_boundaries_in_type_parameters():
  """
  Scenario: `Map<foo.Key,bar.Value>`.
  Expectation: The `,` closing the first reference opens the second.
  """
  targets = match_pattern("var m:Map<foo.Key,bar.Value>;", 0)

  assert [t.hoisted_path for t in targets] == ["foo.Key", "bar.Value"]


def test_enum_value_is_part_of_span_but_not_path():
  line = "var c = foo.Color.RED;"
  (target,) = match_pattern(line, 0)

  assert target.hoisted_path == "foo.Color"
  assert target.enum_value == "RED"
  assert line[target.start_index : target.start_index + target.replace_length] == "foo.Color.RED"


def test_single_letter_segment_is_not_an_enum_value():
  """
  Scenario: A one-letter type nested in a class, e.g. `Outer.T`.
  Expectation: Not read as `foo.Outer` plus enum value `T`.
  """
  assert match_pattern("var t:foo.Outer.T;", 0) == []

  (target,) = match_pattern("var s:foo.Outer.ST;", 0)
  assert target.enum_value == "ST"


def test_qualified_call_rejected_without_new():
  """
  Scenario: A capitalised qualified name directly called.
  Expectation: Treated as a function call, not a type reference.
  """
  assert match_pattern("foo.Logger(x);", 0) == []
  assert match_pattern("trace(foo.Logger(x));", 0) == []


def test_metadata_name_rejected():
  assert match_pattern("@:foo.Marker", 0) == []


def test_metadata_prefix_allowed():
  line = "function f(x:@:nullSafety foo.Bar) {}"
  (target,) = match_pattern(line, 0)

  assert target.hoisted_path == "foo.Bar"
  assert line[target.start_index :].startswith("foo.Bar)")


def test_lowercase_terminal_segment_is_not_a_type():
  assert match_pattern("var x:foo.bar.baz;", 0) == []


def test_start_of_line_boundary():
  (target,) = match_pattern("  foo.bar.Baz;", 0)
  assert target.start_index == 2


def test_import_lines_are_not_references():
  assert match_pattern("import foo.bar.Baz;", 0) == []


def test_iter_matches_always_advances():
  offsets = [next_offset for _, next_offset in iter_matches("x:a.B,c.D,e.F")]
  assert offsets == sorted(set(offsets))


def test_scan_document_uses_physical_line_numbers():
  text = "class A {\n\n  var a:foo.A;\n  var b:bar.B;\n}"
  targets = scan_document(text)

  assert [(t.line_number, t.hoisted_path) for t in targets] == [(2, "foo.A"), (3, "bar.B")]


def test_scan_line_out_of_range():
  assert scan_line("var a:foo.A;", 5) == []
  assert [t.hoisted_path for t in scan_line("var a:foo.A;", 0)] == ["foo.A"]


def test_cursor_inside_reference():
  text = "var a:foo.A = new bar.B();"
  target = scan_at_cursor(text, 0, 8)

  assert target is not None
  assert target.hoisted_path == "foo.A"
  assert target.start_index == 6


def test_cursor_after_new_keyword():
  text = "var a:foo.A = new bar.B();"
  target = scan_at_cursor(text, 0, 20)

  assert target is not None
  assert target.hoisted_path == "bar.B"


def test_cursor_without_reference():
  assert scan_at_cursor("var a = 1;", 0, 9) is None
  assert scan_at_cursor("var a:foo.A;", 3, 0) is None


def test_cursor_on_boundary_character():
  target = scan_at_cursor("var a:foo.A;", 0, 5)

  assert target is not None
  assert target.hoisted_path == "foo.A"
