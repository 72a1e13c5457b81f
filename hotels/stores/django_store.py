"""Django ORM implementation of the ticket and hotel stores."""

import logging

from django.db import DatabaseError
from django.db.models import Prefetch

from hotels import models
from hotels.domain import (
    Capacity,
    Hotel,
    HotelId,
    HotelWithRooms,
    Room,
    TicketContext,
    TicketStatus,
    TicketType,
    UserId,
)
from hotels.domain.errors import StoreUnavailableError
from hotels.stores.interfaces import HotelStore, TicketStore

logger = logging.getLogger(__name__)


def _to_status(value: str) -> TicketStatus:
    try:
        return TicketStatus(value)
    except ValueError:
        return TicketStatus.OTHER


def _to_hotel(row: models.Hotel) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=row.id,
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def get_ticket_context_for_user(self, user_id: UserId) -> TicketContext | None:
        try:
            ticket = (
                models.Ticket.objects.select_related("ticket_type")
                .filter(enrollment__user_id=user_id.value)
                .order_by("enrollment_id", "id")
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Failed to fetch ticket for user %s", user_id.value)
            raise StoreUnavailableError() from exc

        if ticket is None:
            return None

        ticket_type = ticket.ticket_type
        return TicketContext(
            ticket_id=ticket.id,
            status=_to_status(ticket.status),
            ticket_type=TicketType(
                id=ticket_type.id,
                name=ticket_type.name,
                is_remote=ticket_type.is_remote,
                includes_hotel=ticket_type.includes_hotel,
            ),
        )


class DjangoHotelStore(HotelStore):
    """Relational hotel store using Django ORM."""

    def list_hotels(self) -> list[Hotel]:
        try:
            rows = list(models.Hotel.objects.order_by("id"))
        except DatabaseError as exc:
            logger.exception("Failed to list hotels")
            raise StoreUnavailableError() from exc

        return [_to_hotel(row) for row in rows]

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> HotelWithRooms | None:
        rooms = Prefetch("rooms", queryset=models.Room.objects.order_by("id"))
        try:
            row = (
                models.Hotel.objects.prefetch_related(rooms)
                .filter(id=hotel_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Failed to fetch hotel %s", hotel_id.value)
            raise StoreUnavailableError() from exc

        if row is None:
            return None

        return HotelWithRooms(
            hotel=_to_hotel(row),
            rooms=tuple(_to_room(room) for room in row.rooms.all()),
        )
