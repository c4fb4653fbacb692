"""Tests for the FocusState cyclic selection machine."""

from __future__ import annotations

import logging

import pytest

from conftest import Tab
from focuskit.focus import FocusState


def assert_consistent(state: FocusState) -> None:
    """The value names the focused element of the private group, or None."""
    holder = state.registry.get_focused_element(state.focus_hash)
    if state.value is None:
        assert holder is None
    else:
        assert holder is state.element_for(state.value)


def test_next_walks_keys_then_none(tabs) -> None:
    elements = tabs.elements

    assert tabs.value is None
    assert tabs.next() is Tab.HOME
    assert tabs.next() is Tab.SETTINGS
    assert tabs.next() is Tab.ABOUT
    assert tabs.registry.is_focused(elements[Tab.ABOUT])

    assert tabs.next(null_cycle=True) is None
    assert not tabs.registry.is_focused(elements[Tab.ABOUT])
    assert elements[Tab.ABOUT].unfocus_calls == 1

    assert tabs.next() is Tab.HOME
    assert_consistent(tabs)


def test_next_wraps_without_null_cycle(tabs) -> None:
    seen = []
    tabs.on_state_changed.subscribe(seen.append)

    tabs.value = Tab.ABOUT
    assert tabs.next(null_cycle=False) is Tab.HOME

    assert None not in seen
    assert seen == [Tab.ABOUT, Tab.HOME]
    assert_consistent(tabs)


def test_previous_walks_backwards(tabs) -> None:
    assert tabs.previous() is Tab.ABOUT
    assert tabs.previous() is Tab.SETTINGS
    assert tabs.previous() is Tab.HOME
    assert tabs.previous() is None
    assert tabs.previous(null_cycle=False) is Tab.ABOUT
    tabs.value = Tab.HOME
    assert tabs.previous(null_cycle=False) is Tab.ABOUT


@pytest.mark.parametrize("start", list(Tab))
def test_next_then_previous_returns_to_start(tabs, start) -> None:
    tabs.value = start

    tabs.next(null_cycle=False)
    tabs.previous(null_cycle=False)

    assert tabs.value is start
    assert_consistent(tabs)


def test_duplicate_key_is_rejected(registry, make_element, caplog) -> None:
    state: FocusState[Tab] = FocusState(registry)
    home = make_element("H")
    other = make_element("H2")
    state.add(Tab.HOME, home)

    with caplog.at_level(logging.WARNING, logger="focuskit"):
        state.add(Tab.HOME, other)

    assert "DuplicateKeyError" in caplog.text
    assert state.keys == [Tab.HOME]
    assert state.element_for(Tab.HOME) is home
    assert other.focus_group is None


def test_element_bound_twice_is_rejected(registry, make_element, caplog) -> None:
    state: FocusState[Tab] = FocusState(registry)
    home = make_element("H")
    state.add(Tab.HOME, home)

    with caplog.at_level(logging.WARNING, logger="focuskit"):
        state.add(Tab.SETTINGS, home)

    assert "DuplicateBindingError" in caplog.text
    assert state.keys == [Tab.HOME]


def test_element_cannot_join_two_states(registry, make_element, caplog) -> None:
    first: FocusState[Tab] = FocusState(registry)
    second: FocusState[Tab] = FocusState(registry)
    home = make_element("H")
    first.add(Tab.HOME, home)

    with caplog.at_level(logging.WARNING, logger="focuskit"):
        second.add(Tab.HOME, home)

    assert "DuplicateBindingError" in caplog.text
    assert len(second) == 0
    assert home.focus_group == first.focus_hash


def test_direct_focus_switch_fires_one_event(registry, make_element) -> None:
    state: FocusState[int] = FocusState(registry)
    e1 = make_element("E1")
    e2 = make_element("E2")
    state.add(1, e1).add(2, e2)
    state.value = 1

    seen = []
    with_element = []
    state.on_state_changed.subscribe(seen.append)
    state.on_state_changed_with_element.subscribe(lambda key, element: with_element.append((key, element)))

    registry.focus(e2)

    assert state.value == 2
    assert seen == [2]
    assert with_element == [(2, e2)]
    assert_consistent(state)


def test_unfocus_of_selected_element_clears_value(tabs) -> None:
    seen = []
    tabs.value = Tab.SETTINGS
    tabs.on_state_changed.subscribe(seen.append)

    tabs.registry.unfocus(tabs.elements[Tab.SETTINGS])

    assert tabs.value is None
    assert seen == [None]
    assert_consistent(tabs)


def test_reselect_restores_focus(registry, make_element) -> None:
    state: FocusState[str] = FocusState(registry)
    e1 = make_element("E1")
    state.add("k1", e1)

    state.value = "k1"
    state.value = None
    state.value = "k1"

    assert registry.is_focused(e1)
    assert e1.focus_calls == 2
    assert_consistent(state)


def test_setting_same_value_is_noop(tabs) -> None:
    seen = []
    tabs.value = Tab.HOME
    tabs.on_state_changed.subscribe(seen.append)

    tabs.value = Tab.HOME
    tabs.value = None
    tabs.value = None

    assert seen == [None]
    assert tabs.elements[Tab.HOME].focus_calls == 1


def test_state_changed_with_element_reports_none(tabs) -> None:
    events = []
    tabs.on_state_changed_with_element.subscribe(lambda key, element: events.append((key, element)))

    tabs.value = Tab.ABOUT
    tabs.clear_selection()

    assert events == [(Tab.ABOUT, tabs.elements[Tab.ABOUT]), (None, None)]


def test_empty_state_navigation_warns(registry, caplog) -> None:
    state: FocusState[Tab] = FocusState(registry)

    with caplog.at_level(logging.WARNING, logger="focuskit"):
        assert state.next() is None
        assert state.previous() is None

    assert caplog.text.count("EmptyStateError") == 2


def test_initial_value_is_realized_when_bound(registry, make_element) -> None:
    state: FocusState[Tab] = FocusState(registry, value=Tab.SETTINGS)
    home = make_element("H")
    settings = make_element("S")

    state.add(Tab.HOME, home)
    assert not registry.is_focused(home)

    state.add(Tab.SETTINGS, settings)
    assert registry.is_focused(settings)
    assert state.value is Tab.SETTINGS
    assert_consistent(state)


def test_unbound_value_is_rejected(registry, make_element, caplog) -> None:
    state: FocusState[str] = FocusState(registry)
    a = make_element("A")
    state.add("a", a)
    state.value = "a"

    with caplog.at_level(logging.WARNING, logger="focuskit"):
        state.value = "missing"

    assert state.value == "a"
    assert "unbound key" in caplog.text
    assert_consistent(state)


def test_add_moves_focused_element_into_private_group(registry, make_element) -> None:
    button = make_element("B")
    registry.focus(button)
    state: FocusState[str] = FocusState(registry)

    state.add("b", button)

    assert registry.get_focused_element() is None
    assert button.focus_group == state.focus_hash
    assert state.value is None


def test_stale_binding_aborts_selection(tabs, caplog) -> None:
    tabs.value = Tab.HOME
    tabs.elements[Tab.SETTINGS].teardown()

    with caplog.at_level(logging.ERROR, logger="focuskit"):
        tabs.value = Tab.SETTINGS

    assert "StaleReferenceError" in caplog.text
    assert tabs.value is Tab.HOME
    assert tabs.registry.is_focused(tabs.elements[Tab.HOME])


def test_stale_holder_aborts_clear(tabs, caplog) -> None:
    tabs.value = Tab.HOME
    tabs.elements[Tab.HOME].teardown()

    with caplog.at_level(logging.ERROR, logger="focuskit"):
        tabs.value = None

    assert "StaleReferenceError" in caplog.text
    assert tabs.value is Tab.HOME


def test_outsider_cannot_join_private_group(tabs, make_element, caplog) -> None:
    intruder = make_element("X", focus_group=tabs.focus_hash)

    with caplog.at_level(logging.ERROR, logger="focuskit"):
        assert tabs.registry.focus(intruder) is False

    assert "GroupOwnershipError" in caplog.text
    assert tabs.value is None


def test_states_do_not_interfere(registry, make_element) -> None:
    left: FocusState[int] = FocusState(registry)
    right: FocusState[int] = FocusState(registry)
    elements = [make_element(name) for name in ("L1", "L2", "R1")]
    left.add(1, elements[0]).add(2, elements[1])
    right.add(1, elements[2])

    left.value = 2
    right.value = 1

    assert left.value == 2
    assert right.value == 1
    assert_consistent(left)
    assert_consistent(right)


def test_lookup_helpers(tabs) -> None:
    settings = tabs.elements[Tab.SETTINGS]

    assert tabs.key_for(settings) is Tab.SETTINGS
    assert tabs.binds(settings)
    assert Tab.ABOUT in tabs
    assert len(tabs) == 3
    assert tabs.focused_element is None

    tabs.value = Tab.SETTINGS
    assert tabs.focused_element is settings


def test_clear_reselected_from_unfocus_callback_reports_new_key(registry, make_element) -> None:
    state: FocusState[int] = FocusState(registry)
    e1 = make_element("E1")
    e2 = make_element("E2")
    state.add(1, e1).add(2, e2)
    state.value = 1
    # Losing E1 hands the selection straight to E2
    e1.on_unfocus.subscribe(lambda: registry.focus(e2))

    seen = []
    state.on_state_changed.subscribe(seen.append)
    state.value = None

    assert state.value == 2
    assert seen == [2]
    assert_consistent(state)


def test_selection_superseded_from_unfocus_callback(registry, make_element) -> None:
    state: FocusState[int] = FocusState(registry)
    elements = [make_element(name) for name in ("E1", "E2", "E3")]
    for key, element in enumerate(elements, start=1):
        state.add(key, element)
    state.value = 1
    elements[0].on_unfocus.subscribe(
        lambda: registry.focus(elements[2]) if not registry.is_focused(elements[2]) else None
    )

    seen = []
    state.on_state_changed.subscribe(seen.append)
    state.value = 2

    assert state.value == 3
    assert seen == [3]
    assert elements[1].focus_calls == 0
    assert_consistent(state)
