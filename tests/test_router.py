from stylecheck.config import DEFAULT_LINTERS, LinterConfig, RunOptions
from stylecheck.router import match_files, selected_linters

FILES = ["app.rb", "lib/util.rb", "site.js", "view.html.haml", "main.scss", "old.sass", "README.md"]


def test_match_files_by_tag():
    """Test a linter without extensions matches its tag."""
    assert match_files("rb", DEFAULT_LINTERS["rb"], FILES) == ["app.rb", "lib/util.rb"]
    assert match_files("haml", DEFAULT_LINTERS["haml"], FILES) == ["view.html.haml"]


def test_match_files_multiple_extensions():
    """Test a linter with several extensions."""
    assert match_files("scss", DEFAULT_LINTERS["scss"], FILES) == ["main.scss", "old.sass"]


def test_match_files_anchored_and_case_sensitive():
    """Test suffixes must end the path, with a dot, in the same case."""
    files = ["app.rb.orig", "APP.RB", "herb", "archive.rbx", "ok.rb"]

    assert match_files("rb", DEFAULT_LINTERS["rb"], files) == ["ok.rb"]


def test_match_files_escapes_suffixes():
    """Test suffixes are matched literally."""
    linter = LinterConfig(bin="x", extensions=["c++"])

    assert match_files("cpp", linter, ["a.c++", "a.cxx"]) == ["a.c++"]


def test_unmatched_file_reaches_no_linter():
    """Test a file without a configured extension matches no group."""
    for tag, linter in DEFAULT_LINTERS.items():
        assert "README.md" not in match_files(tag, linter, FILES)


def test_selected_linters_all():
    """Test that all groups run without a filter."""
    assert list(selected_linters(DEFAULT_LINTERS, RunOptions())) == ["rb", "js", "haml", "scss"]


def test_selected_linters_filtered():
    """Test that a file-type filter keeps a single group."""
    assert list(selected_linters(DEFAULT_LINTERS, RunOptions(file_type="js"))) == ["js"]
