"""
Ordered, selectable list of apartments that feeds the scheduler.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from utils.data_models import ApartmentId
from utils.logging_config import get_logger

logger = get_logger(__name__)

DIRECTIONS = ('up', 'down')


@dataclass
class Apartment:
    """An apartment in the rotation list"""
    number: ApartmentId
    is_selected: bool = True

    def toggle_selection(self) -> None:
        self.is_selected = not self.is_selected

    def get_display_name(self) -> str:
        return f"Apartamento {self.number}"


class ApartmentRoster:
    """
    Rotation order and selection state for the building's apartments.

    The order of the roster is the rotation order used for the schedule.
    """

    def __init__(self, apartment_ids: Iterable[ApartmentId], selected: Optional[Iterable[ApartmentId]] = None):
        """
        Args:
            apartment_ids: Apartments in their initial order
            selected: Apartments initially selected (all when None)
        """
        selected_ids = None if selected is None else set(selected)
        self._apartments: List[Apartment] = [
            Apartment(number, selected_ids is None or number in selected_ids)
            for number in apartment_ids
        ]

    def __len__(self) -> int:
        return len(self._apartments)

    @property
    def apartments(self) -> List[Apartment]:
        return list(self._apartments)

    def order(self) -> List[ApartmentId]:
        return [apartment.number for apartment in self._apartments]

    def positions(self) -> List[int]:
        """1-based position indicators, in display order."""
        return list(range(1, len(self._apartments) + 1))

    def selected_apartments(self) -> List[ApartmentId]:
        """Selected apartments in rotation order."""
        return [apartment.number for apartment in self._apartments if apartment.is_selected]

    def _index_of(self, apartment_id: ApartmentId) -> int:
        for index, apartment in enumerate(self._apartments):
            if apartment.number == apartment_id:
                return index
        raise KeyError(apartment_id)

    def move(self, index: int, direction: str) -> bool:
        """
        Swap the apartment at index with its neighbour.

        Args:
            index: Position of the apartment to move
            direction: 'up' or 'down'

        Returns:
            bool: True if the order changed; moves past either end are ignored
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"Direction must be one of {DIRECTIONS}, got '{direction}'")
        if not 0 <= index < len(self._apartments):
            return False

        target = index - 1 if direction == 'up' else index + 1
        if not 0 <= target < len(self._apartments):
            return False

        items = self._apartments
        items[index], items[target] = items[target], items[index]
        logger.debug(f"Moved apartment {items[target].number} {direction} to position {target + 1}")
        return True

    def move_to(self, from_index: int, to_index: int) -> bool:
        """
        Remove the apartment at from_index and insert it at to_index (drag and drop).

        Returns:
            bool: True if the order changed
        """
        size = len(self._apartments)
        if not (0 <= from_index < size and 0 <= to_index < size) or from_index == to_index:
            return False
        apartment = self._apartments.pop(from_index)
        self._apartments.insert(to_index, apartment)
        return True

    def toggle(self, apartment_id: ApartmentId) -> bool:
        """
        Flip the selection of an apartment.

        Returns:
            bool: The new selection state

        Raises:
            KeyError: If the apartment is not in the roster
        """
        apartment = self._apartments[self._index_of(apartment_id)]
        apartment.toggle_selection()
        return apartment.is_selected
