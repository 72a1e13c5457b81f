"""Decides whether a user may view hotel inventory."""

from hotels.domain.models import TicketContext, TicketStatus


def is_eligible(context: TicketContext | None) -> bool:
    """Return True when the ticket is paid, in-person and includes lodging.

    A missing context (no enrollment, no ticket) is never eligible.
    """
    if context is None:
        return False

    ticket_type = context.ticket_type
    is_paid = context.status is TicketStatus.PAID
    is_hostable = not ticket_type.is_remote and ticket_type.includes_hotel

    return is_paid and is_hostable
