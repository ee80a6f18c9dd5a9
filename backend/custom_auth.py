from typing import Optional, Tuple

from django.conf import settings
from rest_framework import HTTP_HEADER_ENCODING
from rest_framework.request import Request
from rest_framework_simplejwt.authentication import JWTAuthentication as BaseJWTAuthentication
from rest_framework_simplejwt.tokens import Token


class JWTAuthentication(BaseJWTAuthentication):
    """
    JWT authentication for browser and API clients.

    Browser clients send the access token in an HTTP-only cookie (name taken
    from ``LMS_AUTH_COOKIE``); other clients use ``Authorization: Bearer``.
    The cookie wins when both are present. Token validation and user lookup
    are inherited from simplejwt.
    """

    www_authenticate_realm = "api"

    def authenticate(self, request: Request) -> Optional[Tuple[object, Token]]:
        cookie_name = getattr(settings, "LMS_AUTH_COOKIE", "access_token")
        raw_cookie = request.COOKIES.get(cookie_name)
        if not raw_cookie:
            return super().authenticate(request)

        validated_token = self.get_validated_token(raw_cookie.encode(HTTP_HEADER_ENCODING))
        return self.get_user(validated_token), validated_token
