#!/usr/bin/env python3
"""
Tests for highlighting and cell decomposition in full and diff modes.

Run with: uv run pytest test_decomposer.py
    or: uv run python test_decomposer.py
"""
import sys
sys.path.insert(0, '.')

import pytest
from fasthtml.common import to_xml

from document import MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit
from services import DecomposeMode, decompose, highlight_lines, split_lines, HighlightedLines


MARKDOWN = {"cell_type": "markdown", "source": ["# Title\n", "text"]}
CODE = {
    "cell_type": "code",
    "execution_count": 2,
    "source": ["x = 1\n", "y = 2\n", "x + y"],
    "outputs": [
        {"output_type": "stream", "name": "stdout", "text": ["hi\n"]},
        {"output_type": "execute_result", "data": {"text/plain": ["3"]}},
    ],
}
RAW = {"cell_type": "raw", "source": ["plain"]}


def test_split_lines_keeps_line_ends():
    assert split_lines("a\nb\n") == ["a\n", "b\n"]
    assert split_lines("a\nb") == ["a\n", "b"]
    assert split_lines("") == []


def test_highlight_lines_aligns_fragments():
    result = highlight_lines(["x = 1\n", "\n", "print(x)\n"])
    assert result.language == "py"
    assert result.directive is None
    assert len(result.fragments) == 3
    assert "print" in str(result.fragments[2])
    assert result.display == result.fragments


def test_highlight_lines_keeps_leading_blank_lines():
    result = highlight_lines(["\n", "\n", "x\n"])
    assert len(result.fragments) == 3


def test_highlight_lines_magic_directive():
    result = highlight_lines(["%%bash\n", "echo hi\n"])
    assert result.language == "bash"
    assert result.directive == "%%bash\n"
    assert result.source_lines == ["echo hi\n"]
    assert len(result.fragments) == 1
    assert len(result.display) == 2
    assert 'class="language-tag"' in to_xml(result.display[0])


def test_highlight_lines_forced_language_ignores_magic():
    result = highlight_lines(["%%bash\n", "echo hi\n"], force_language="txt")
    assert result.language == "txt"
    assert result.directive is None
    assert result.source_lines == ["%%bash\n", "echo hi\n"]
    assert len(result.fragments) == 2


def test_highlight_lines_escapes_markup():
    result = highlight_lines(["<b>bold</b>\n"], force_language="txt")
    assert "<b>" not in str(result.fragments[0])
    assert "&lt;b&gt;" in str(result.fragments[0])


def test_highlight_lines_empty():
    result = highlight_lines([])
    assert result.fragments == []
    assert result.display == []


def test_full_mode_one_unit_per_cell():
    units = decompose([MARKDOWN, CODE, RAW], DecomposeMode.FULL)
    assert [type(u) for u in units] == [MarkdownUnit, CodeBlockUnit, RawUnit]
    block = units[1]
    assert block.label == "In [2]:"
    assert block.source_lines == CODE["source"]
    assert block.outputs == CODE["outputs"]
    assert units[0].source_lines == MARKDOWN["source"]
    assert units[2].cell is RAW


def test_full_mode_is_default():
    assert [type(u) for u in decompose([CODE])] == [CodeBlockUnit]


def test_diff_mode_splits_code_cells():
    units = decompose([MARKDOWN, CODE, RAW], DecomposeMode.DIFF)
    assert [type(u) for u in units] == [
        MarkdownUnit,
        CodeLineUnit, CodeLineUnit, CodeLineUnit,
        CodeOutputUnit, CodeOutputUnit,
        RawUnit,
    ]

    lines = units[1:4]
    assert [u.raw for u in lines] == CODE["source"]
    assert [u.is_head for u in lines] == [True, False, False]
    assert [u.is_last for u in lines] == [False, False, True]
    assert [u.label for u in lines] == ["In [2]:", None, None]
    assert all(u.display is not None for u in lines)

    outputs = units[4:6]
    assert [u.output for u in outputs] == CODE["outputs"]


def test_diff_mode_accepts_string_mode():
    units = decompose([CODE], "diff")
    assert len(units) == 5


def test_diff_mode_single_line_is_head_and_last():
    units = decompose([{"cell_type": "code", "source": ["x\n"]}], DecomposeMode.DIFF)
    assert len(units) == 1
    assert units[0].is_head and units[0].is_last
    assert units[0].label is None


def test_diff_mode_empty_source_keeps_outputs():
    cell = {"cell_type": "code", "source": [], "outputs": [{"output_type": "stream", "text": ["a"]}]}
    units = decompose([cell], DecomposeMode.DIFF)
    assert [type(u) for u in units] == [CodeOutputUnit]


def test_diff_mode_missing_fields():
    units = decompose([{"cell_type": "code"}], DecomposeMode.DIFF)
    assert units == []


def test_diff_mode_magic_line_becomes_language_tag():
    cell = {"cell_type": "code", "execution_count": 1, "source": ["%%bash\n", "echo hi\n"]}
    units = decompose([cell], DecomposeMode.DIFF)
    assert len(units) == 1
    line = units[0]
    assert isinstance(line, CodeLineUnit)
    assert line.raw == "echo hi\n"
    assert line.is_head and line.is_last
    assert line.language_tag == "%%bash\n"
    assert line.label == "In [1]:"
    assert "echo" in str(line.display)


def test_diff_mode_magic_only_cell_keeps_one_line():
    cell = {"cell_type": "code", "execution_count": 7, "source": ["%%bash\n"],
            "outputs": [{"output_type": "stream", "text": ["x"]}]}
    units = decompose([cell], DecomposeMode.DIFF)
    assert [type(u) for u in units] == [CodeLineUnit, CodeOutputUnit]
    line = units[0]
    assert line.raw == "%%bash\n"
    assert line.language_tag == "%%bash\n"
    assert line.display is None
    assert line.is_head and line.is_last
    assert line.label == "In [7]:"


def test_diff_mode_counts_lines_across_cells():
    cells = [
        {"cell_type": "code", "source": ["a\n", "b\n"]},
        {"cell_type": "markdown", "source": ["m"]},
        {"cell_type": "code", "source": ["c\n", "d\n", "e\n"]},
    ]
    lines = [u for u in decompose(cells, DecomposeMode.DIFF) if isinstance(u, CodeLineUnit)]
    assert len(lines) == 5
    assert [u.is_head for u in lines] == [True, False, True, False, False]
    assert [u.is_last for u in lines] == [False, True, False, False, True]


def test_diff_mode_non_mapping_cells_are_raw():
    units = decompose(["oops", 3], DecomposeMode.DIFF)
    assert [type(u) for u in units] == [RawUnit, RawUnit]


def test_diff_mode_uses_custom_highlighter():
    calls = []

    def fake_highlighter(lines):
        calls.append(list(lines))
        return HighlightedLines(language="py", source_lines=list(lines),
                                fragments=[f"<{i}>" for i in range(len(lines))])

    units = decompose([{"cell_type": "code", "source": ["a\n", "b\n"]}],
                      DecomposeMode.DIFF, highlighter=fake_highlighter)
    assert calls == [["a\n", "b\n"]]
    assert [u.display for u in units] == ["<0>", "<1>"]


def test_diff_mode_short_highlight_leaves_display_empty():
    def short_highlighter(lines):
        return HighlightedLines(language="py", source_lines=list(lines), fragments=["only"])

    units = decompose([{"cell_type": "code", "source": ["a\n", "b\n"]}],
                      DecomposeMode.DIFF, highlighter=short_highlighter)
    assert [u.display for u in units] == ["only", None]


def test_decompose_does_not_mutate_cells():
    cell = {"cell_type": "code", "source": ["%%bash\n", "ls\n"], "outputs": []}
    decompose([cell], DecomposeMode.DIFF)
    assert cell["source"] == ["%%bash\n", "ls\n"]


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, "-v"]))
