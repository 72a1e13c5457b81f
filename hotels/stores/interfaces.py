"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId, HotelWithRooms, TicketContext, UserId


class TicketStore(ABC):
    """Interface for reading a user's ticket state."""

    @abstractmethod
    def get_ticket_context_for_user(self, user_id: UserId) -> TicketContext | None:
        """Return the first enrollment's first ticket with its type.

        Returns None when the user has no enrollment or no ticket.
        """
        ...


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id ascending."""
        ...

    @abstractmethod
    def get_hotel_with_rooms(self, hotel_id: HotelId) -> HotelWithRooms | None:
        """Return a hotel with its rooms ordered by id, or None if not found."""
        ...
