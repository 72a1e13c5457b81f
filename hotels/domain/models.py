"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from hotels.domain.value_objects import Capacity, HotelId


class TicketStatus(Enum):
    """Lifecycle status of a ticket."""

    RESERVED = "RESERVED"
    PAID = "PAID"
    # Any other status written by the ticketing system.
    OTHER = "OTHER"


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    name: str
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class TicketContext:
    """A user's resolved enrollment -> ticket -> ticket type chain."""

    ticket_id: int
    status: TicketStatus
    ticket_type: TicketType


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel."""

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: int
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class HotelWithRooms:
    """A hotel together with its rooms, ordered by id."""

    hotel: Hotel
    rooms: tuple[Room, ...] = ()
