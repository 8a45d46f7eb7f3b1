"""
Event order lists.

An order list is one ordering of event UIDs, used to render a particular
timeline view. Several lists coexist; index 0 is the default.

Lists are handed out as tuples. Every mutation goes through this class,
and the swap/move operations validate all positions before touching the
list, so a failed call never leaves a list half-edited.
"""

from collections import Counter
from collections.abc import Iterable
import logging

from storyline.core.exceptions import (
    OrderListError,
    OrderListNotFoundError,
    OrderPositionError,
)

logger = logging.getLogger(__name__)


class OrderListManager:
    """
    Manager for the collection of event order lists.

    Usage:
        >>> orders = OrderListManager(default_lists=1)
        >>> orders.append_everywhere(10)
        >>> orders.append_everywhere(20)
        >>> orders.swap(0, 0, 1)
        >>> orders.get_order(0)
        (20, 10)
    """

    def __init__(self, default_lists: int = 1) -> None:
        """
        Initialize OrderListManager.

        Args:
            default_lists: Number of empty lists to start with
        """
        self._default_lists = default_lists
        self._lists: list[list[int]] = [[] for _ in range(default_lists)]

    @property
    def count(self) -> int:
        return len(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def _has_list(self, list_index: int) -> bool:
        return 0 <= list_index < len(self._lists)

    def _require_list(self, list_index: int) -> list[int]:
        if not self._has_list(list_index):
            logger.warning("Order list %d does not exist (count=%d)", list_index, len(self._lists))
            raise OrderListNotFoundError(list_index, len(self._lists))
        return self._lists[list_index]

    @staticmethod
    def _require_position(list_index: int, order: list[int], position: int) -> None:
        if not 0 <= position < len(order):
            logger.warning(
                "Position %d out of range for order list %d (length=%d)",
                position,
                list_index,
                len(order),
            )
            raise OrderPositionError(list_index, position, len(order))

    def get_order(self, list_index: int) -> tuple[int, ...] | None:
        """
        Get the UID order of one list.

        Args:
            list_index: Index of the order list

        Returns:
            The UIDs in order, or None if the list does not exist
        """
        if not self._has_list(list_index):
            return None
        return tuple(self._lists[list_index])

    def get_orders(self) -> list[tuple[int, ...]]:
        return [tuple(order) for order in self._lists]

    def index_of(self, list_index: int, uid: int) -> int:
        """
        Find the position of a UID in a list.

        Returns:
            Position, or -1 if the list or the UID is absent
        """
        if not self._has_list(list_index):
            return -1
        try:
            return self._lists[list_index].index(uid)
        except ValueError:
            return -1

    def swap(self, list_index: int, pos_a: int, pos_b: int) -> None:
        """
        Exchange the UIDs at two positions of one list.

        Raises:
            OrderListNotFoundError: If the list does not exist
            OrderPositionError: If either position is out of range
        """
        order = self._require_list(list_index)
        self._require_position(list_index, order, pos_a)
        self._require_position(list_index, order, pos_b)

        order[pos_a], order[pos_b] = order[pos_b], order[pos_a]

    def move(self, list_index: int, from_pos: int, to_pos: int) -> None:
        """
        Move the UID at from_pos to to_pos.

        Entries between the two positions shift by one: left when moving
        forward, right when moving backward.

        Raises:
            OrderListNotFoundError: If the list does not exist
            OrderPositionError: If either position is out of range
        """
        order = self._require_list(list_index)
        self._require_position(list_index, order, from_pos)
        self._require_position(list_index, order, to_pos)

        if from_pos == to_pos:
            return

        order.insert(to_pos, order.pop(from_pos))

    def add_order_list(self, initial_sequence: Iterable[int] = ()) -> int:
        """
        Append a new order list.

        Args:
            initial_sequence: UIDs of the new list, in order

        Returns:
            Index of the new list

        Raises:
            OrderListError: If the sequence repeats a UID
        """
        order = list(initial_sequence)
        duplicates = sorted(uid for uid, n in Counter(order).items() if n > 1)
        if duplicates:
            msg = f"Order list repeats UIDs: {duplicates}"
            logger.warning(msg)
            raise OrderListError(msg)

        self._lists.append(order)
        return len(self._lists) - 1

    def ensure_default(self) -> None:
        """Recreate the default lists if the collection was emptied."""
        if not self._lists:
            self._lists = [[] for _ in range(self._default_lists)]

    def append_everywhere(self, uid: int) -> None:
        for order in self._lists:
            order.append(uid)

    def remove_everywhere(self, uid: int) -> None:
        for order in self._lists:
            if uid in order:
                order.remove(uid)

    def clear(self) -> None:
        """Remove every order list."""
        self._lists.clear()
