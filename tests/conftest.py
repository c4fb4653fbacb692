"""Shared fixtures for the focus tests."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import pytest

from focuskit.focus import FocusableElement, FocusRegistry, FocusState


class Tab(Enum):
    HOME = "home"
    SETTINGS = "settings"
    ABOUT = "about"


class RecordingElement(FocusableElement):
    """Focusable element that records its focus reactions."""

    def __init__(self, name: str, focus_group: Optional[str] = None, journal: Optional[List[str]] = None):
        self.name = name
        self.focus_group = focus_group
        self.focus_calls = 0
        self.unfocus_calls = 0
        self.journal = journal if journal is not None else []

    def handle_focus(self) -> None:
        self.focus_calls += 1
        self.journal.append(f"focus:{self.name}")

    def handle_unfocus(self) -> None:
        self.unfocus_calls += 1
        self.journal.append(f"unfocus:{self.name}")

    def __repr__(self) -> str:
        return f"<RecordingElement {self.name}>"


@pytest.fixture
def registry() -> FocusRegistry:
    return FocusRegistry()


@pytest.fixture
def journal() -> List[str]:
    return []


@pytest.fixture
def make_element(journal):
    def factory(name: str, focus_group: Optional[str] = None) -> RecordingElement:
        return RecordingElement(name, focus_group=focus_group, journal=journal)

    return factory


@pytest.fixture
def tabs(registry, make_element):
    """FocusState over Tab with HOME, SETTINGS, ABOUT bound in that order."""
    state: FocusState[Tab] = FocusState(registry, name="Tabs")
    elements = {
        Tab.HOME: make_element("H"),
        Tab.SETTINGS: make_element("S"),
        Tab.ABOUT: make_element("Ab"),
    }
    for key, element in elements.items():
        state.add(key, element)
    state.elements = elements
    return state
