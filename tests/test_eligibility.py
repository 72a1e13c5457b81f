"""Unit tests for the eligibility rule.

Run with: pytest tests/test_eligibility.py -v
"""

import itertools

import pytest

from hotels.domain import TicketContext, TicketStatus, TicketType, is_eligible


def _context(status=TicketStatus.PAID, is_remote=False, includes_hotel=True) -> TicketContext:
    return TicketContext(
        ticket_id=1,
        status=status,
        ticket_type=TicketType(
            id=1, name="Presencial + Hotel", is_remote=is_remote, includes_hotel=includes_hotel
        ),
    )


class TestIsEligible:
    """Tests for is_eligible."""

    def test_missing_context_is_not_eligible(self):
        assert is_eligible(None) is False

    def test_paid_in_person_ticket_with_hotel_is_eligible(self):
        assert is_eligible(_context()) is True

    @pytest.mark.parametrize(
        "status, is_remote, includes_hotel",
        list(itertools.product(TicketStatus, [True, False], [True, False])),
    )
    def test_returns_bool_for_every_combination(self, status, is_remote, includes_hotel):
        result = is_eligible(_context(status, is_remote, includes_hotel))

        expected = status is TicketStatus.PAID and not is_remote and includes_hotel
        assert result is expected

    @pytest.mark.parametrize(
        "overrides",
        [
            {"status": TicketStatus.RESERVED},
            {"is_remote": True},
            {"includes_hotel": False},
        ],
        ids=["unpaid", "remote", "no-hotel"],
    )
    def test_flipping_any_condition_denies(self, overrides):
        assert is_eligible(_context(**overrides)) is False
