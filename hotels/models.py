"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for a user's event registration."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11)
    birthday = models.DateField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=100)
    price = models.PositiveIntegerField(help_text="Price in cents")
    is_remote = models.BooleanField()
    includes_hotel = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Status(models.TextChoices):
        RESERVED = "RESERVED"
        PAID = "PAID"

    enrollment = models.ForeignKey(
        Enrollment, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(max_length=16, choices=Status.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["enrollment"], name="hotels_ticket_enrollment_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_type.name} - {self.status}"


class Hotel(models.Model):
    """Persistence model for hotels."""

    name = models.CharField(max_length=255)
    image = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Room(models.Model):
    """Persistence model for hotel rooms."""

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    name = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["hotel"], name="hotels_room_hotel_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.hotel.name} - {self.name}"


class Session(models.Model):
    """An issued bearer token. Tokens without a row are rejected."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sessions"
    )
    token = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Session for {self.user}"
