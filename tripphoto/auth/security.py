from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import structlog
from fastapi import Request

from ..errors import ConfigurationError, ErrorKind, Unauthorized
from ..schemas.auth import Claims, TokenRequest


logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "


class TokenService:
    """Issues and validates HMAC-signed bearer tokens.

    The signing key is injected at construction and never changes afterwards,
    so one instance can be shared by every request.
    """

    def __init__(self, secret: Optional[str], algorithm: str = "HS256", ttl_seconds: int = 60 * 60 * 3):
        if not secret:
            raise ConfigurationError("JWT_SECRET must be set")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl_seconds = ttl_seconds

    def issue_token(self, identity: TokenRequest, ttl_seconds: Optional[int] = None) -> str:
        now = datetime.now(tz=timezone.utc)
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        payload = {
            "username": identity.username,
            "empCode": identity.emp_code,
            "site": identity.site,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=ttl)).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to generate token: {e}")

    def decode_token(self, token: str) -> Claims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise Unauthorized("Token expired", kind=ErrorKind.INVALID_OR_EXPIRED_TOKEN)
        except jwt.InvalidTokenError:
            raise Unauthorized("Invalid token", kind=ErrorKind.INVALID_OR_EXPIRED_TOKEN)
        return Claims.model_validate(payload)

    def validate_token(self, raw_header: Optional[str]) -> Claims:
        if not raw_header:
            raise Unauthorized("Authorization header required", kind=ErrorKind.MISSING_OR_MALFORMED_HEADER)
        if not raw_header.startswith(BEARER_PREFIX):
            raise Unauthorized("Invalid token format", kind=ErrorKind.MISSING_OR_MALFORMED_HEADER)
        token = raw_header[len(BEARER_PREFIX):].strip()
        if not token:
            raise Unauthorized("Invalid token format", kind=ErrorKind.MISSING_OR_MALFORMED_HEADER)
        claims = self.decode_token(token)
        # PyJWT accepts exp == now; an expiry equal to the current second is already stale
        if claims.expires_at <= datetime.now(tz=timezone.utc):
            raise Unauthorized("Token expired", kind=ErrorKind.INVALID_OR_EXPIRED_TOKEN)
        return claims


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_claims(request: Request) -> Optional[Claims]:
    """Auth gate for upload routes; a no-op when the deployment disables it."""
    if not request.app.state.settings.require_upload_auth:
        return None
    service = get_token_service(request)
    try:
        return service.validate_token(request.headers.get("Authorization"))
    except Unauthorized as e:
        logger.info("token_rejected", kind=e.kind.value, path=request.url.path)
        raise
