"""Bearer token authentication backed by stored sessions."""

import secrets

from django.conf import settings
from django.core import signing
from rest_framework import authentication, exceptions

from hotels.models import Session


def create_session(user) -> str:
    """Issue a signed token for ``user`` and persist it as a Session."""
    token = signing.dumps(
        {"userId": user.pk, "nonce": secrets.token_hex(8)},
        salt=settings.HOTELS_TOKEN_SALT,
    )
    Session.objects.create(user=user, token=token)
    return token


class BearerSessionAuthentication(authentication.BaseAuthentication):
    """Accepts ``Authorization: Bearer <token>`` for tokens with a live session."""

    keyword = "Bearer"

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Invalid bearer header")

        try:
            token = header[1].decode()
            payload = signing.loads(token, salt=settings.HOTELS_TOKEN_SALT)
        except (UnicodeError, signing.BadSignature):
            raise exceptions.AuthenticationFailed("Invalid token")

        session = Session.objects.select_related("user").filter(token=token).first()
        if session is None or session.user_id != payload.get("userId"):
            raise exceptions.AuthenticationFailed("No session for token")

        return (session.user, token)

    def authenticate_header(self, request) -> str:
        return f'{self.keyword} realm="api"'
