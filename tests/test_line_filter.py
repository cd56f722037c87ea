from stylecheck.line_filter import (
    filter_diagnostics,
    filter_output,
    format_file_header,
    parse_diagnostic,
)


def test_parse_diagnostic_compact():
    """Test parsing a compact diagnostic line."""
    assert parse_diagnostic("C:10:unused var") == {
        "severity": "C",
        "line": 10,
        "message": "unused var",
    }


def test_parse_diagnostic_rubocop_simple_format():
    """Test parsing rubocop's padded simple format."""
    diagnostic = parse_diagnostic("W:  3:  5: Lint/UselessAssignment: Useless assignment")

    assert diagnostic["severity"] == "W"
    assert diagnostic["line"] == 3
    assert diagnostic["message"].startswith("5: Lint/UselessAssignment")


def test_parse_diagnostic_rejects_other_lines():
    """Test headers, summaries and other severities are not diagnostics."""
    assert parse_diagnostic("== app.rb ==") is None
    assert parse_diagnostic("1 file inspected, 2 offenses detected") is None
    assert parse_diagnostic("E:  4:  1: Lint/Syntax: unexpected token") is None
    assert parse_diagnostic("") is None


def test_filter_output_keeps_changed_lines():
    """Test only diagnostics on changed lines survive, under a file header."""
    output = "C:10:unused var\nW:25:trailing space"

    result = filter_output("foo.rb", output, {10, 30})

    assert result == "== foo.rb ==\nC:10:unused var"


def test_filter_output_nothing_survives():
    """Test that no output is produced when nothing is on a changed line."""
    assert filter_output("foo.rb", "C:10:unused var\nW:25:trailing space", {1, 2}) == ""
    assert filter_output("foo.rb", "", {1}) == ""


def test_filter_diagnostics_is_idempotent():
    """Test that filtering filtered output changes nothing."""
    output = "== foo.rb ==\nC:  1:  1: a\nW:  2:  1: b\nC:  7:  3: c\n\n3 offenses"
    changed = {1, 7, 9}

    once = filter_diagnostics(output, changed)
    twice = filter_diagnostics("\n".join(once), changed)

    assert once == ["C:  1:  1: a", "C:  7:  3: c"]
    assert twice == once


def test_format_file_header():
    """Test the header naming the file."""
    assert format_file_header("lib/app.rb") == "== lib/app.rb =="
