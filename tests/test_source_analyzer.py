import pytest
from godep.source_analyzer import (
    ParseError,
    analyze_file,
    analyze_source,
    clean_import_path,
    tokenize,
)


def test_analyze_package_and_grouped_imports():
    source = (
        "package main\n"
        "\n"
        "import (\n"
        '\t"fmt"\n'
        '\tstr "strings"\n'
        '\t_ "net/http/pprof"\n'
        '\t. "math"\n'
        ")\n"
        "\n"
        'func main() { fmt.Println("hi") }\n'
    )
    unit = analyze_source(source, "main.go")
    assert unit.path == "main.go"
    assert unit.package == "main"
    assert unit.imports == {"fmt", "strings", "net/http/pprof", "math"}
    assert unit.has_entry


def test_analyze_single_imports_and_semicolons():
    unit = analyze_source('package util; import "fmt"; import "os"\nvar x = 1\n')
    assert unit.package == "util"
    assert unit.imports == {"fmt", "os"}
    assert not unit.has_entry


def test_duplicate_imports_collapse():
    unit = analyze_source('package a\nimport "fmt"\nimport f "fmt"\n')
    assert unit.imports == {"fmt"}


def test_import_paths_are_cleaned():
    assert clean_import_path('"./foo/../bar"') == "bar"
    assert clean_import_path('"a//b/"') == "a/b"
    assert clean_import_path("`raw/path`") == "raw/path"


def test_method_named_main_is_not_entry():
    source = "package main\ntype T struct{}\nfunc (t T) main() {}\n"
    assert not analyze_source(source).has_entry


def test_similar_function_name_is_not_entry():
    assert not analyze_source("package main\nfunc mainly() {}\n").has_entry


def test_entry_in_comments_and_strings_ignored():
    source = (
        "package main\n"
        "// func main() {}\n"
        "/* func main() {\n} */\n"
        'var s = "func main"\n'
        "var r = `func main`\n"
    )
    assert not analyze_source(source).has_entry


def test_custom_entry_function():
    source = "package main\nfunc Run() {}\n"
    assert analyze_source(source, entry_function="Run").has_entry
    assert not analyze_source(source).has_entry


def test_leading_comments_before_package():
    source = "// Copyright\n/* doc */\npackage tools\n"
    assert analyze_source(source).package == "tools"


def test_tokenize_skips_comments():
    kinds = [value for _, value, _ in tokenize("a // b\n/* c */ d")]
    assert kinds == ["a", "d"]


def test_missing_package_clause():
    with pytest.raises(ParseError, match="expected 'package' clause"):
        analyze_source('import "fmt"\n', "bad.go")


def test_empty_file_is_parse_error():
    with pytest.raises(ParseError):
        analyze_source("", "empty.go")


def test_unterminated_comment():
    with pytest.raises(ParseError) as exc_info:
        analyze_source("package main\n/* oops\n", "c.go")
    assert "c.go:2: comment not terminated" in str(exc_info.value)
    assert exc_info.value.path == "c.go"


def test_unterminated_string():
    with pytest.raises(ParseError, match="string literal not terminated"):
        analyze_source('package main\nvar s = "abc\n', "s.go")


def test_unterminated_import_block():
    with pytest.raises(ParseError, match="import block not terminated"):
        analyze_source('package main\nimport (\n"fmt"\n', "i.go")


def test_import_without_path():
    with pytest.raises(ParseError, match="expected import path"):
        analyze_source("package main\nimport fmt\n", "i.go")


def test_analyze_file(tmp_path):
    go_file = tmp_path / "server.go"
    go_file.write_text('package main\nimport "net/http"\nfunc main() {}\n')

    unit = analyze_file(go_file)
    assert unit.path == str(go_file)
    assert unit.imports == {"net/http"}
    assert unit.has_entry

    unit = analyze_file(go_file, display_path="server.go")
    assert unit.path == "server.go"


def test_analyze_missing_file(tmp_path):
    with pytest.raises(ParseError, match="cannot read"):
        analyze_file(tmp_path / "missing.go")


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)
