from hotels.domain.eligibility import is_eligible
from hotels.domain.models import (
    Hotel,
    HotelWithRooms,
    Room,
    TicketContext,
    TicketStatus,
    TicketType,
)
from hotels.domain.value_objects import Capacity, HotelId, UserId

__all__ = [
    "Hotel",
    "HotelWithRooms",
    "Room",
    "TicketContext",
    "TicketStatus",
    "TicketType",
    "HotelId",
    "UserId",
    "Capacity",
    "is_eligible",
]
