import pytest

from fontbrowser.app_logic import panel_controller
from fontbrowser.app_logic.panel_controller import FontBrowserController, PanelStatus
from fontbrowser.app_logic.rows import COLUMN_HEADERS, DEFAULT_SAMPLE_TEXT, FONT_COLUMN


class FakeView:
    def __init__(self):
        self.columns = None
        self.sort = None
        self.hook = None
        self.rows = []
        self.redraws = 0
        self.focused = 0
        self.selected = None

    def set_columns(self, headers):
        self.columns = tuple(headers)

    def set_sort(self, column, descending=False):
        self.sort = (column, descending)

    def set_refresh_hook(self, hook):
        self.hook = hook

    def set_rows(self, rows):
        self.rows = list(rows)

    def redraw(self):
        self.redraws += 1

    def current_family(self):
        return self.selected

    def focus(self):
        self.focused += 1


class Recorder:
    def __init__(self, answer=True):
        self.answer = answer
        self.questions = []
        self.applied = []

    def confirm(self, question):
        self.questions.append(question)
        return self.answer

    def set_display_font(self, family):
        self.applied.append(family)


def make_controller(font_source, answer=True):
    recorder = Recorder(answer)
    controller = FontBrowserController(
        font_source,
        recorder.set_display_font,
        recorder.confirm,
        known_scripts=["tamil", "greek", "latin"],
    )
    return controller, recorder


def test_activate_configures_view_and_refreshes(font_source):
    controller, _ = make_controller(font_source)
    view = FakeView()

    assert controller.status is PanelStatus.INACTIVE
    assert controller.activate(view) is view

    assert controller.status is PanelStatus.ACTIVE
    assert view.columns == COLUMN_HEADERS
    assert view.sort == (FONT_COLUMN, False)
    assert view.hook == controller.refresh
    assert [r.family for r in view.rows] == ["DejaVu Sans", "Noto Sans Tamil", "Liberation Serif"]
    assert view.redraws == 1
    assert view.focused == 1


def test_activate_twice_reuses_surface(font_source):
    controller, _ = make_controller(font_source)
    first = FakeView()
    controller.activate(first)

    second = FakeView()
    assert controller.activate(second) is first
    assert second.columns is None
    assert first.focused == 2
    assert first.redraws == 1


def test_refresh_hook_rebuilds_rows(font_source):
    controller, _ = make_controller(font_source)
    view = FakeView()
    controller.activate(view)

    view.hook()
    assert view.redraws == 2
    assert len(view.rows) == 3


def test_set_sample_text_renders_every_row(font_source):
    controller, _ = make_controller(font_source)
    view = FakeView()
    controller.activate(view)

    controller.set_sample_text("Sphinx of black quartz")
    assert {r.sample for r in view.rows} == {"Sphinx of black quartz"}


def test_empty_sample_text_restores_default(font_source):
    controller, _ = make_controller(font_source)
    view = FakeView()
    controller.activate(view)

    controller.set_sample_text("custom")
    controller.set_sample_text("")
    assert controller.state.sample_text == DEFAULT_SAMPLE_TEXT
    assert {r.sample for r in view.rows} == {DEFAULT_SAMPLE_TEXT}


def test_script_filter_narrows_and_none_restores(font_source):
    controller, _ = make_controller(font_source)
    view = FakeView()
    controller.activate(view)

    controller.set_script_filter("tamil")
    tamil_rows = list(view.rows)
    assert [r.family for r in tamil_rows] == ["Noto Sans Tamil"]

    controller.set_script_filter("none")
    assert controller.state.script is None
    assert len(view.rows) >= len(tamil_rows)
    assert [r.family for r in view.rows] == ["DejaVu Sans", "Noto Sans Tamil", "Liberation Serif"]


def test_unknown_script_is_rejected_without_changing_state(font_source):
    controller, _ = make_controller(font_source)
    controller.activate(FakeView())
    controller.set_script_filter("greek")

    with pytest.raises(ValueError):
        controller.set_script_filter("klingon")
    assert controller.state.script == "greek"


def test_commands_are_ignored_when_inactive(font_source):
    controller, recorder = make_controller(font_source)

    controller.set_sample_text("ignored")
    controller.set_script_filter("tamil")
    controller.refresh()
    assert controller.apply_font_from_current_row() is False
    assert controller.copy_current_family() is None

    assert controller.state.sample_text == DEFAULT_SAMPLE_TEXT
    assert controller.state.script is None
    assert font_source.calls == []
    assert recorder.questions == []


def test_apply_font_without_selection_is_noop(font_source):
    controller, recorder = make_controller(font_source)
    controller.activate(FakeView())

    assert controller.apply_font_from_current_row() is False
    assert recorder.questions == []
    assert recorder.applied == []


def test_apply_font_declined_leaves_font_alone(font_source):
    controller, recorder = make_controller(font_source, answer=False)
    view = FakeView()
    controller.activate(view)
    view.selected = "Liberation Serif"

    assert controller.apply_font_from_current_row() is False
    assert recorder.questions == ["Set display font to Liberation Serif?"]
    assert recorder.applied == []


def test_apply_font_accepted_sets_family(font_source):
    controller, recorder = make_controller(font_source, answer=True)
    view = FakeView()
    controller.activate(view)
    view.selected = "Noto Sans Tamil"

    assert controller.apply_font_from_current_row() is True
    assert recorder.applied == ["Noto Sans Tamil"]


def test_deactivate_returns_to_inactive(font_source):
    controller, _ = make_controller(font_source)
    controller.activate(FakeView())
    controller.deactivate()

    assert controller.status is PanelStatus.INACTIVE
    assert controller.view is None
    controller.set_sample_text("after close")
    assert controller.state.sample_text == DEFAULT_SAMPLE_TEXT


def test_copy_current_family(font_source, monkeypatch):
    copied = []
    monkeypatch.setattr(panel_controller, "copy_to_clipboard", lambda text: copied.append(text) or True)
    controller, _ = make_controller(font_source)
    view = FakeView()
    controller.activate(view)

    assert controller.copy_current_family() is None
    view.selected = "DejaVu Sans"
    assert controller.copy_current_family() == "DejaVu Sans"
    assert copied == ["DejaVu Sans"]
