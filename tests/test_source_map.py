import pytest

from blaze.source_map import SourceFile, SourceMap

CONTENT = "fn main() {\n    let x = 1;\n}\n"


@pytest.fixture
def source_map():
    smap = SourceMap()
    smap.add_file("main.bz", CONTENT)
    return smap


def test_get_file_returns_content(source_map):
    source = source_map.get_file("main.bz")
    assert source.name == "main.bz"
    assert source.content == CONTENT


def test_unknown_file_is_none(source_map):
    assert source_map.get_file("other.bz") is None
    assert source_map.get_line_column("other.bz", 0) is None
    assert source_map.get_line_text("other.bz", 1) is None


def test_line_starts_follow_newlines(source_map):
    starts = source_map.get_file("main.bz").line_starts
    assert starts[0] == 0
    assert all(CONTENT[start - 1] == "\n" for start in starts[1:])
    assert len(starts) == CONTENT.count("\n") + 1


def test_first_offset_is_line_one_column_one(source_map):
    assert source_map.get_line_column("main.bz", 0) == (1, 1)


def test_every_offset_maps_back(source_map):
    starts = source_map.get_file("main.bz").line_starts
    for offset, ch in enumerate(CONTENT):
        line, column = source_map.get_line_column("main.bz", offset)
        assert starts[line - 1] + column - 1 == offset
        assert source_map.get_line_text("main.bz", line)[column - 1] == ch


def test_line_text_includes_break(source_map):
    assert source_map.get_line_text("main.bz", 1) == "fn main() {\n"
    assert source_map.get_line_text("main.bz", 3) == "}\n"


def test_lines_rejoin_to_content(source_map):
    count = len(source_map.get_file("main.bz").line_starts)
    lines = [source_map.get_line_text("main.bz", n) for n in range(1, count + 1)]
    assert "".join(lines) == CONTENT


def test_line_out_of_range_is_none(source_map):
    count = len(source_map.get_file("main.bz").line_starts)
    assert source_map.get_line_text("main.bz", 0) is None
    assert source_map.get_line_text("main.bz", count + 1) is None


def test_add_file_replaces_existing(source_map):
    source_map.add_file("main.bz", "x")
    assert source_map.get_file("main.bz").content == "x"
    assert source_map.get_line_text("main.bz", 1) == "x"


def test_negative_offset_raises(source_map):
    with pytest.raises(ValueError):
        source_map.get_line_column("main.bz", -1)


def test_source_file_computes_line_starts():
    source = SourceFile("a.bz", "a\nb")
    assert [source.content[start] for start in source.line_starts] == ["a", "b"]