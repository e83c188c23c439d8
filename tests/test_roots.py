from godep.registry import PackageRegistry
from godep.roots import classify, common_files, target_name
from godep.types import Root, SourceUnit


def _registry(*units):
    registry = PackageRegistry()
    for unit in units:
        registry.add_unit(unit)
    return registry


def test_target_name_strips_extension():
    assert target_name("main.go") == "main"


def test_target_name_first_separator_wins():
    assert target_name("app.v2.go") == "app"


def test_target_name_without_separator():
    assert target_name("Makefile") == "Makefile"


def test_target_name_fallback_for_empty_stem():
    assert target_name(".hidden.go") == "main"
    assert target_name(".hidden.go", "tool") == "tool"


def test_classify_roots_in_file_order():
    registry = _registry(
        SourceUnit("server.go", "main", has_entry=True),
        SourceUnit("common.go", "main"),
        SourceUnit("client.go", "main", has_entry=True),
    )
    roots = classify(registry)
    assert roots == [Root("server.go", "server"), Root("client.go", "client")]


def test_classify_ignores_other_packages():
    registry = _registry(SourceUnit("lib.go", "lib", has_entry=True))
    assert classify(registry) == []


def test_classify_custom_entry_package_and_exec_name():
    registry = _registry(SourceUnit(".cmd.go", "cmd", has_entry=True))
    assert classify(registry, "cmd", "runner") == [Root(".cmd.go", "runner")]


def test_common_files():
    registry = _registry(
        SourceUnit("a.go", "main", has_entry=True),
        SourceUnit("shared.go", "main"),
        SourceUnit("b.go", "main", has_entry=True),
        SourceUnit("util.go", "main"),
    )
    roots = classify(registry)
    assert common_files(registry, "main", roots) == ["shared.go", "util.go"]


def test_common_files_without_entry_package():
    assert common_files(PackageRegistry(), "main", []) == []


def test_target_name_uses_last_path_component():
    assert target_name("./server.go") == "server"
    assert target_name("cmd/app.v2.go") == "cmd/app"
    assert target_name("../dir/x.go") == "../dir/x"
    assert target_name("cmd/.go", "tool") == "cmd/tool"


def test_classify_dot_slash_roots_get_distinct_targets():
    registry = _registry(
        SourceUnit("./server.go", "main", has_entry=True),
        SourceUnit("./client.go", "main", has_entry=True),
    )
    assert [root.target for root in classify(registry)] == ["server", "client"]
