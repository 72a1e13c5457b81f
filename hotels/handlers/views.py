"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain import HotelId, UserId
from hotels.domain.errors import DomainError, ErrorCode, InvalidHotelIdError
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services.hotel_service import HotelService
from hotels.stores.django_store import DjangoHotelStore, DjangoTicketStore

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE = {
    ErrorCode.INVALID_HOTEL_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.HOTEL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_hotel_service() -> HotelService:
    return HotelService(hotel_store=DjangoHotelStore(), ticket_store=DjangoTicketStore())


def error_response(error: DomainError) -> Response:
    if error.code is ErrorCode.STORE_UNAVAILABLE:
        logger.warning("Responding 503: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_ERROR_CODE[error.code],
    )


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = get_hotel_service().list_hotels_for(UserId(request.user.pk))
        except DomainError as error:
            return error_response(error)

        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            return error_response(InvalidHotelIdError())

        try:
            hotel = get_hotel_service().get_hotel_detail_for(UserId(request.user.pk), parsed_id)
        except DomainError as error:
            return error_response(error)

        return Response(HotelWithRoomsSerializer(hotel).data)
