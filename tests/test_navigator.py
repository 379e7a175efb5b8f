import logging

import pytest

from fakes import FakeContainer, FakeDocument, FakeElement, KeyEvent, RecordingEffects
from spatial_navigator.config import NavigatorConfig
from spatial_navigator.key_types import Direction
from spatial_navigator.navigator import Navigator, NavigatorState


@pytest.fixture
def nav(container, document, effects):
    return Navigator(container, document, effects)


def test_enable_scans_and_registers_once(nav, document, container):
    nav.enable()
    nav.enable()
    assert len(document.listeners) == 1
    assert document.queries == [(container, "item")]
    assert nav.state == NavigatorState.enabled_no_selection


def test_first_key_selects_first_candidate_without_scrolling(nav, document, grid, effects, container):
    nav.enable()
    document.press(KeyEvent("Down"))
    assert nav.selected is grid[0]
    assert nav.state == NavigatorState.enabled_selected
    assert effects.calls == [("highlight", grid[0], "selected")]
    assert (container.scroll_left, container.scroll_top) == (0, 0)


def test_down_moves_to_nearest(nav, document, grid, effects):
    nav.enable()
    document.press(KeyEvent("Down"))
    document.press(KeyEvent("Down"))
    assert nav.selected is grid[2]
    assert effects.calls[-2:] == [
        ("unhighlight", grid[0], "selected"),
        ("highlight", grid[2], "selected"),
    ]


def test_right_at_end_keeps_selection(nav, grid, effects):
    nav.enable()
    nav.select(grid[3])
    before = list(effects.calls)
    assert nav.move(Direction.right) is grid[3]
    assert effects.calls == before


def test_unbound_keys_are_not_consumed(nav, document, effects):
    nav.enable()
    assert document.press(KeyEvent("a")) == [False]
    assert document.press(KeyEvent("Left")) == [True]
    assert nav.selected is not None


def test_no_candidates_is_a_noop(container, effects):
    document = FakeDocument([])
    nav = Navigator(container, document, effects)
    nav.enable()
    assert document.press(KeyEvent("Down")) == [True]
    assert nav.selected is None
    assert effects.calls == []


def test_select_same_element_twice_is_one_toggle(nav, grid, effects, monkeypatch):
    nav.enable()
    scrolls = []
    monkeypatch.setattr(nav.scroller, "scroll_to", lambda el, d: scrolls.append((el, d)))
    nav.select(grid[1], Direction.right)
    nav.select(grid[1], Direction.right)
    assert effects.calls == [("highlight", grid[1], "selected")]
    assert scrolls == [(grid[1], Direction.right)]


def test_select_none_is_a_noop(nav, effects):
    nav.enable()
    nav.select(None, Direction.down)
    assert effects.calls == []


def test_text_input_receives_focus(container, effects):
    entry = FakeElement(0, 60, text_input=True)
    card = FakeElement(0, 0)
    document = FakeDocument([card, entry])
    nav = Navigator(container, document, effects)
    nav.enable()
    nav.move(Direction.down)
    nav.move(Direction.down)
    assert nav.selected is entry
    assert effects.calls[-1] == ("focus", entry)


def test_selection_scrolls_into_view(document, effects, grid):
    container = FakeContainer(width=100, height=50)
    nav = Navigator(container, document, effects)
    nav.enable()
    nav.move(Direction.down)
    nav.move(Direction.down)
    assert nav.selected is grid[2]
    assert container.scroll_top == 50 - 0 - (50 - 50)


def test_separate_scroll_container(document, effects, grid, container):
    scroll_box = FakeContainer(width=100, height=50)
    nav = Navigator(container, document, effects, NavigatorConfig(scroll_container=scroll_box))
    nav.enable()
    nav.move(Direction.down)
    nav.move(Direction.right)
    assert nav.selected is grid[1]
    assert scroll_box.scroll_left == 100 - 0 - (100 - 100)
    assert container.scroll_left == 0


def test_enable_then_disable_leaves_nothing_behind(nav, document, grid, effects):
    nav.enable()
    nav.move(Direction.down)
    nav.disable()
    nav.disable()
    assert document.listeners == []
    assert nav.selected is None
    assert nav.state == NavigatorState.disabled
    assert [c for c in effects.calls if c[0] == "unhighlight"] == [("unhighlight", grid[0], "selected")]


def test_disable_without_selection(nav, document, effects):
    nav.disable()
    nav.enable()
    nav.disable()
    assert document.listeners == []
    assert effects.calls == []


def test_select_while_disabled_is_ignored(nav, grid, effects):
    nav.select(grid[0])
    assert nav.selected is None
    assert effects.calls == []


def test_destroy_releases_container(nav, document):
    nav.enable()
    nav.destroy()
    nav.destroy()
    assert nav.container is None
    assert document.listeners == []
    assert len(nav.candidates) == 0
    with pytest.raises(RuntimeError):
        nav.enable()


def test_candidates_are_stale_until_rescan(nav, document, grid):
    nav.enable()
    extra = FakeElement(0, 100)
    document.elements.append(extra)
    nav.move(Direction.down)
    nav.move(Direction.down)
    assert nav.move(Direction.down) is grid[2]
    nav.rescan()
    assert nav.move(Direction.down) is extra


def test_custom_bindings(container, document, effects, grid):
    config = NavigatorConfig(left="h", down="j", up="k", right="l")
    nav = Navigator(container, document, effects, config)
    nav.enable()
    assert document.press(KeyEvent("Down")) == [False]
    document.press(KeyEvent("j"))
    document.press(KeyEvent("l"))
    assert nav.selected is grid[1]


def test_custom_marker(container, document, effects, grid):
    nav = Navigator(container, document, effects, NavigatorConfig(selected="active"))
    nav.enable()
    nav.move(Direction.up)
    assert effects.calls == [("highlight", grid[0], "active")]


def test_lifecycle_is_logged(nav, caplog):
    with caplog.at_level(logging.INFO, logger="spatial_navigator.navigator"):
        nav.enable()
        nav.disable()
    assert [r.message for r in caplog.records] == ["enable", "disable"]


def test_exactly_one_marker_while_navigating(nav, document, effects):
    nav.enable()
    for key in ["Down", "Right", "Down", "Left", "Up", "Up", "Right"]:
        document.press(KeyEvent(key))
    marked = set()
    for call in effects.calls:
        if call[0] in ("highlight", "focus"):
            marked.add(id(call[1]))
        else:
            marked.discard(id(call[1]))
    assert marked == {id(nav.selected)}


def test_scroll_container_defaults_to_container(container, document):
    effects = RecordingEffects()
    nav = Navigator(container, document, effects)
    assert nav.scroll_container is container


def test_shared_key_binding_fails_at_construction(container, document, effects):
    with pytest.raises(ValueError):
        Navigator(container, document, effects, NavigatorConfig(left="x", right="x"))
