"""
Hotbar widget.

A row of slots with exactly one selected slot, driven by scrolling.
"""

import itertools
import logging
from typing import Iterable, List, Optional

from .controls import HotbarSlot
from ...focus import FocusRegistry, FocusState

logger = logging.getLogger(__name__)


class Hotbar:
    """
    Row of HotbarSlots backed by a FocusState.

    Selecting a slot focuses it; scrolling past either end wraps around
    without ever leaving the hotbar unselected.
    """

    def __init__(self, registry: FocusRegistry, slots: Optional[Iterable[HotbarSlot]] = None):
        """
        Initialize the hotbar.

        Args:
            registry: Focus registry
            slots: Initial slots, first one selected
        """
        self.registry = registry
        self.state: FocusState[int] = FocusState(registry, name="Hotbar")
        self.slots: List[HotbarSlot] = []
        self._frozen = False
        self._ids = itertools.count()

        if slots:
            self.add_slots(*slots)

    @property
    def frozen(self) -> bool:
        """Whether scrolling is ignored."""
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def unfreeze(self) -> None:
        self._frozen = False

    def toggle_freeze(self) -> None:
        self._frozen = not self._frozen

    @property
    def selected_slot(self) -> Optional[HotbarSlot]:
        element = self.state.focused_element
        return element if element in self.slots else None

    @property
    def selected_slot_index(self) -> int:
        """Index of the selected slot, -1 if none."""
        slot = self.selected_slot
        return self.slots.index(slot) if slot is not None else -1

    @selected_slot_index.setter
    def selected_slot_index(self, value: int) -> None:
        if not self.slots:
            logger.warning("Hotbar has no slots to select")
            return
        if value < 0:
            value = len(self.slots) - 1
        slot = self.slots[value % len(self.slots)]
        self.state.value = self.state.key_for(slot)

    def scroll(self, delta: float) -> None:
        """
        Move the selection by scroll wheel direction.

        Args:
            delta: Positive scrolls to the next slot, negative to the previous
        """
        if self._frozen or not self.slots:
            return
        if delta > 0:
            self.selected_slot_index = self.selected_slot_index + 1
        elif delta < 0:
            self.selected_slot_index = self.selected_slot_index - 1

    def add_slots(self, *slots: HotbarSlot) -> "Hotbar":
        """
        Append slots; the first slot ever added gets selected.

        A None slot stops adding.
        """
        for slot in slots:
            if slot is None:
                return self
            self.slots.append(slot)
            self.state.add(next(self._ids), slot)

        if self.selected_slot is None and self.slots:
            self.selected_slot_index = 0
        return self

    def add_new_slot(self, template: HotbarSlot) -> "Hotbar":
        """Append a copy of a template slot."""
        return self.add_slots(template.copy())

    def remove_slot(self, index: int) -> "Hotbar":
        """
        Destroy the slot at an index.

        Removing the selected slot selects its neighbour.
        """
        if not 0 <= index < len(self.slots):
            logger.warning(f"Trying to access invalid hotbar index: {index}")
            return self

        was_selected = index == self.selected_slot_index
        slot = self.slots.pop(index)

        # Neighbour first, so the selection never passes through None
        if was_selected and self.slots:
            self.selected_slot_index = min(index, len(self.slots) - 1)
        slot.destroy()
        return self

    def __len__(self) -> int:
        return len(self.slots)
