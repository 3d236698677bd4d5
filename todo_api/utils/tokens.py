import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC

from jose import jwt, jws, JWTError, JWSError, ExpiredSignatureError

from todo_api.config import Settings, ConfigurationError
from todo_api.errors import TokenMalformed, TokenSignatureInvalid, TokenExpired
from todo_api.models.user import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str
    role: Role


class TokenService:
    """Issues and validates the signed bearer tokens handed out at login.

    Holds nothing but the read-only settings, so one instance is shared by
    every request.
    """

    def __init__(self, settings: Settings):
        if not settings.secret_key:
            raise ConfigurationError("SECRET_KEY is not set")
        self._key = settings.secret_key
        self._algorithm = settings.algorithm
        self._lifetime = timedelta(minutes=settings.access_token_expire_minutes)

    def issue(self, user) -> str:
        now = datetime.now(UTC)
        claims = {
            "sub": str(user.id),
            "username": user.username,
            "role": Role.parse(user.role).value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),  # JWT spec uses Unix timestamp
        }
        return jwt.encode(claims, self._key, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """Return the claims of a genuine, unexpired token.

        Raises TokenMalformed, TokenSignatureInvalid or TokenExpired. The
        signature is checked before the expiry, so an expired token is only
        reported as such when it was really issued with our key.
        """
        if not token:
            raise TokenMalformed("empty token")

        try:
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise self._reject(TokenMalformed(str(e)))

        try:
            jws.verify(token, self._key, algorithms=[self._algorithm])
        except JWSError as e:
            raise self._reject(TokenSignatureInvalid(str(e)))

        try:
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError as e:
            raise self._reject(TokenExpired(str(e)))
        except JWTError as e:
            raise self._reject(TokenMalformed(str(e)))

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise self._reject(TokenMalformed("missing or invalid subject"))

        return TokenClaims(
            user_id=user_id,
            username=payload.get("username") or "",
            role=Role.parse(payload.get("role")),
        )

    def _reject(self, error):
        logger.debug("token rejected: %s (%s)", error.reason, error.detail)
        return error
