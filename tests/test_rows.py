from fontbrowser.app_logic.rows import (
    DEFAULT_SAMPLE_TEXT,
    FONT_COLUMN,
    TEXT_COLUMN,
    FontRow,
    PanelState,
    build_rows,
    dedupe_families,
    paginate,
    sort_rows,
)


def test_dedupe_keeps_first_occurrence_order():
    assert dedupe_families(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_dedupe_is_idempotent():
    once = dedupe_families(["x", "y", "x", "z"])
    assert dedupe_families(once) == once


def test_build_rows_uses_default_sample_text(font_source):
    rows = build_rows(PanelState(), font_source)
    assert [r.family for r in rows] == ["DejaVu Sans", "Noto Sans Tamil", "Liberation Serif"]
    assert all(r.sample == DEFAULT_SAMPLE_TEXT for r in rows)


def test_build_rows_filters_by_script(font_source):
    rows = build_rows(PanelState(sample_text="வணக்கம்", script="tamil"), font_source)
    assert rows == [FontRow("Noto Sans Tamil", "வணக்கம்")]
    assert font_source.calls == ["tamil"]


def test_build_rows_twice_gives_same_rows(font_source):
    state = PanelState(script="greek")
    assert build_rows(state, font_source) == build_rows(state, font_source)


def test_build_rows_empty_source():
    class Empty:
        def families(self, script=None):
            return []

    assert build_rows(PanelState(), Empty()) == []


def test_unfiltered_is_superset_of_filtered(font_source):
    filtered = build_rows(PanelState(script="greek"), font_source)
    unfiltered = build_rows(PanelState(), font_source)
    assert len(unfiltered) >= len(filtered)
    assert {r.family for r in filtered} <= {r.family for r in unfiltered}


def test_sort_rows_by_font_is_case_insensitive():
    rows = [FontRow("beta", "t"), FontRow("Alpha", "t"), FontRow("gamma", "t")]
    assert [r.family for r in sort_rows(rows)] == ["Alpha", "beta", "gamma"]
    assert [r.family for r in sort_rows(rows, FONT_COLUMN, descending=True)] == ["gamma", "beta", "Alpha"]


def test_sort_rows_by_text_breaks_ties_on_family():
    rows = [FontRow("b", "same"), FontRow("a", "same")]
    assert [r.family for r in sort_rows(rows, TEXT_COLUMN)] == ["a", "b"]


def test_paginate_slices_and_clamps():
    rows = [FontRow(str(i), "t") for i in range(7)]

    page_rows, page, count = paginate(rows, 1, 3)
    assert [r.family for r in page_rows] == ["3", "4", "5"]
    assert (page, count) == (1, 3)

    page_rows, page, count = paginate(rows, 10, 3)
    assert [r.family for r in page_rows] == ["6"]
    assert page == 2

    _, page, _ = paginate(rows, -4, 3)
    assert page == 0


def test_paginate_disabled_and_empty():
    rows = [FontRow(str(i), "t") for i in range(5)]
    assert paginate(rows, 3, 0) == (rows, 0, 1)
    assert paginate([], 0, 10) == ([], 0, 1)
