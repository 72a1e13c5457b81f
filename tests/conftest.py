"""Pytest configuration and shared fixtures."""

import itertools
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from hotels import models
from hotels.handlers.authentication import create_session

_sequence = itertools.count(1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(db):
    def factory():
        n = next(_sequence)
        return get_user_model().objects.create_user(
            username=f"user{n}", email=f"user{n}@example.com"
        )

    return factory


@pytest.fixture
def make_enrollment(db):
    def factory(user):
        return models.Enrollment.objects.create(
            user=user,
            name="Ada Lovelace",
            cpf="12345678901",
            birthday=date(1990, 12, 10),
            phone="5521999999999",
        )

    return factory


@pytest.fixture
def make_ticket_type(db):
    def factory(*, is_remote: bool = False, includes_hotel: bool = True):
        return models.TicketType.objects.create(
            name=f"Ticket type {next(_sequence)}",
            price=25000,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )

    return factory


@pytest.fixture
def make_ticket(db):
    def factory(enrollment, ticket_type, status=models.Ticket.Status.PAID):
        return models.Ticket.objects.create(
            enrollment=enrollment, ticket_type=ticket_type, status=status
        )

    return factory


@pytest.fixture
def make_hotel(db):
    def factory():
        n = next(_sequence)
        return models.Hotel.objects.create(
            name=f"Hotel {n}", image=f"https://example.com/hotels/{n}.jpg"
        )

    return factory


@pytest.fixture
def make_room(db):
    def factory(hotel, capacity: int = 2):
        return models.Room.objects.create(
            hotel=hotel, name=f"Room {next(_sequence)}", capacity=capacity
        )

    return factory


@pytest.fixture
def eligible_user(make_user, make_enrollment, make_ticket_type, make_ticket):
    """A user holding a paid, in-person ticket that includes lodging."""
    user = make_user()
    enrollment = make_enrollment(user)
    make_ticket(enrollment, make_ticket_type(is_remote=False, includes_hotel=True))
    return user


@pytest.fixture
def client_for(db):
    """Return an APIClient carrying a valid bearer token for the given user."""

    def factory(user) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {create_session(user)}")
        return client

    return factory
