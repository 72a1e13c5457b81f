"""Serializers for transforming domain models to API responses."""

from datetime import timezone

from rest_framework import serializers


class UTCMillisecondsField(serializers.DateTimeField):
    """ISO 8601 in UTC with millisecond precision, e.g. ``2024-05-01T12:00:00.123Z``."""

    def to_representation(self, value):
        if value is None:
            return None
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = UTCMillisecondsField(source="created_at")
    updatedAt = UTCMillisecondsField(source="updated_at")


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model.

    Timestamps are taken from the owning hotel, passed in as ``context["hotel"]``.
    """

    id = serializers.IntegerField()
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    hotelId = serializers.IntegerField(source="hotel_id.value")
    createdAt = serializers.SerializerMethodField()
    updatedAt = serializers.SerializerMethodField()

    def get_createdAt(self, room) -> str:
        return UTCMillisecondsField().to_representation(self.context["hotel"].created_at)

    def get_updatedAt(self, room) -> str:
        return UTCMillisecondsField().to_representation(self.context["hotel"].updated_at)


class HotelWithRoomsSerializer(serializers.Serializer):
    """Serializer for HotelWithRooms: the hotel fields plus a ``Rooms`` list."""

    def to_representation(self, instance):
        data = HotelSerializer(instance.hotel).data
        data["Rooms"] = RoomSerializer(
            instance.rooms, many=True, context={"hotel": instance.hotel}
        ).data
        return data
