"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Check eligibility before touching hotel data
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from hotels.domain import Hotel, HotelId, HotelWithRooms, UserId, is_eligible
from hotels.domain.errors import ForbiddenError, HotelNotFoundError
from hotels.stores.interfaces import HotelStore, TicketStore

logger = logging.getLogger(__name__)


class HotelService:
    """Service for hotel inventory queries."""

    def __init__(self, hotel_store: HotelStore, ticket_store: TicketStore) -> None:
        self._hotel_store = hotel_store
        self._ticket_store = ticket_store

    def list_hotels_for(self, user_id: UserId) -> list[Hotel]:
        """Return all hotels.

        Raises:
            ForbiddenError: If the user's ticket does not include lodging.
        """
        self._ensure_eligible(user_id)
        return self._hotel_store.list_hotels()

    def get_hotel_detail_for(self, user_id: UserId, hotel_id: HotelId) -> HotelWithRooms:
        """Return a hotel with its rooms.

        Raises:
            ForbiddenError: If the user's ticket does not include lodging.
            HotelNotFoundError: If the hotel does not exist.
        """
        self._ensure_eligible(user_id)

        hotel = self._hotel_store.get_hotel_with_rooms(hotel_id)
        if hotel is None:
            logger.info("Hotel %s not found", hotel_id.value)
            raise HotelNotFoundError()

        return hotel

    def _ensure_eligible(self, user_id: UserId) -> None:
        context = self._ticket_store.get_ticket_context_for_user(user_id)
        if not is_eligible(context):
            logger.info("User %s is not eligible to view hotels", user_id.value)
            raise ForbiddenError()
