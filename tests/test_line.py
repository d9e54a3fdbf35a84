import pytest

from zen_engine.buffer import HighlightSpan, Line, OutOfBounds, PLAIN_TEXT, Segment, Style


@pytest.mark.parametrize("at", [0, 2, 5])
def test_insert_then_delete_restores_content(at: int) -> None:
    line = Line("hello")

    line.insert(at, "X")
    assert len(line) == 6
    line.delete(at)

    assert line.content == "hello"


def test_insert_past_end_raises_out_of_bounds() -> None:
    line = Line("ab")

    with pytest.raises(OutOfBounds) as exc_info:
        line.insert(3, "c")

    assert exc_info.value.column == 3
    assert exc_info.value.length == 2


def test_delete_past_end_is_noop() -> None:
    line = Line("ab")

    line.delete(2)
    line.delete(10)

    assert line.content == "ab"


@pytest.mark.parametrize("at", range(0, 6))
def test_split_then_append_round_trips(at: int) -> None:
    line = Line("hello")

    tail = line.split(at)
    assert line.content == "hello"[:at]
    assert tail.content == "hello"[at:]

    line.append(tail)
    assert line.content == "hello"
    assert tail.content == ""


def test_tabs_expand_to_next_tab_stop() -> None:
    line = Line("a\tb", tab_stop=4)

    assert line.rendered == "a   b"
    assert line.width() == 5
    assert line.render_column(1) == 1
    assert line.render_column(2) == 4
    assert line.render_column(99) == 5


def test_wide_characters_cut_at_window_edge_become_blanks() -> None:
    line = Line("日本")

    assert line.width() == 4
    assert line.render_text(1, 4) == " 本"
    assert line.render_text(0, 3) == "日 "


def test_render_window_selects_columns() -> None:
    line = Line("abcdef")

    assert line.render_text(2, 4) == "cd"
    assert line.render_text(10, 20) == ""


def test_render_groups_segments_by_style() -> None:
    line = Line("abcd")
    line.mark_match(1, 3)

    assert line.render() == [
        Segment("a", Style.NONE),
        Segment("bc", Style.MATCH),
        Segment("d", Style.NONE),
    ]


def test_search_span_wins_over_syntax_span() -> None:
    line = Line("let x")

    def classifier(content, file_type):
        return [HighlightSpan(0, 3, Style.KEYWORD)]

    line.highlight(classifier, PLAIN_TEXT)
    line.mark_match(2, 5)

    styles = [segment.style for segment in line.render()]
    assert styles == [Style.KEYWORD, Style.MATCH]


def test_mutation_drops_search_span_and_marks_highlight_stale() -> None:
    line = Line("abc")
    line.highlight(None)
    line.mark_match(0, 1)
    assert not line.highlight_stale

    line.insert(3, "d")

    assert line.search_spans == ()
    assert line.highlight_stale
    assert line.rendered == "abcd"


def test_classifier_spans_are_clipped_to_content() -> None:
    line = Line("ab")

    line.highlight(lambda content, ft: [HighlightSpan(1, 10, Style.NUMBER)])

    assert line.spans == (HighlightSpan(1, 2, Style.NUMBER),)


def test_find_helpers_respect_bounds() -> None:
    line = Line("foo bar foo")

    assert line.find_forward("foo") == 0
    assert line.find_forward("foo", 1) == 8
    assert line.find_forward("baz") is None
    assert line.find_backward("foo") == 8
    assert line.find_backward("foo", 8) == 0
    assert line.find_backward("foo", 2) is None
