"""Tests for menu rendering."""

import copy

from gitrecent.cli.ui.render import format_indicator, format_item, render
from gitrecent.core.model import ListModel
from gitrecent.utils.constants import TITLE, Ansi

BRANCHES = ["feat-x", "main", "fix-y", "dev", "release"]

LESS_OFF = "\x1b[G  \x1b[30m(less)\x1b[0m\n"
LESS_ON = "\x1b[G  \x1b[47;30m(less)\x1b[0m\n"
MORE_OFF = "\x1b[G  \x1b[30m(more)\x1b[0m\n"
MORE_ON = "\x1b[G  \x1b[47;30m(more)\x1b[0m\n"


def test_initial_frame():
    model = ListModel(BRANCHES, active="main", window_size=3)

    assert render(model) == [
        "\x1b[H\x1b[J",
        "Select recent branch:\n",
        LESS_OFF,
        "\x1b[G \x1b[44;30m  feat-x\x1b[0m\n",
        "\x1b[G * main\n",
        "\x1b[G   fix-y\n",
        MORE_ON,
    ]


def test_frame_after_scrolling():
    model = ListModel(BRANCHES, active="main", window_size=3)
    for _ in range(3):
        model.navigate_down()

    assert render(model) == [
        "\x1b[H\x1b[J",
        "Select recent branch:\n",
        LESS_ON,
        "\x1b[G * main\n",
        "\x1b[G   fix-y\n",
        "\x1b[G \x1b[44;30m  dev\x1b[0m\n",
        MORE_ON,
    ]


def test_frame_at_bottom():
    model = ListModel(BRANCHES, window_size=3)
    for _ in range(10):
        model.navigate_down()

    frame = render(model)
    assert frame[2] == LESS_ON
    assert frame[-1] == MORE_OFF
    assert frame[-2] == "\x1b[G \x1b[44;30m  release\x1b[0m\n"


def test_selected_active_item_keeps_mark():
    model = ListModel(BRANCHES, active="feat-x", window_size=3)
    assert render(model)[3] == "\x1b[G \x1b[44;30m* feat-x\x1b[0m\n"


def test_short_list_renders_every_item():
    model = ListModel(["main", "dev"], active="dev", window_size=5)
    frame = render(model)

    assert len(frame) == 2 + 1 + 2 + 1
    assert frame[2] == LESS_OFF
    assert frame[-1] == MORE_OFF


def test_no_active_marker():
    model = ListModel(BRANCHES, active="", window_size=5)
    assert "*" not in "".join(render(model))


def test_custom_title():
    model = ListModel(BRANCHES)
    assert render(model, title="Pick one:")[1] == "Pick one:\n"
    assert render(model)[1] == f"{TITLE}\n"


def test_render_does_not_mutate_model():
    model = ListModel(BRANCHES, active="main", window_size=3)
    for _ in range(3):
        model.navigate_down()
    before = copy.deepcopy(model)

    first = render(model)
    second = render(model)

    assert first == second
    assert model == before


def test_format_helpers():
    assert format_indicator("(more)", True).count(Ansi.INDICATOR_ON) == 1
    assert format_indicator("(more)", False).count(Ansi.INDICATOR_OFF) == 1
    assert format_item("dev", is_active=False, is_selected=False) == "\x1b[G   dev\n"
