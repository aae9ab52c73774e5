import time
import uuid
from datetime import timedelta
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from errors import ExpiredToken, Forbidden, InvalidToken, Unauthenticated

ADMIN_ROLE = "admin"
USER_ROLE = "user"

bearer_scheme = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """Verified caller, attached to the request for the rest of its handling."""
    user_id: str
    email: str
    role: str = USER_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


# ---------------- PASSWORDS ----------------
class PasswordHasher:
    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, hashed: Optional[str]) -> bool:
        if not hashed:
            # Burn the same time as a real comparison for unknown accounts
            self.context.dummy_verify()
            return False
        return self.context.verify(password, hashed)


# ---------------- TOKENS ----------------
class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], float] = time.time,
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self.clock = clock

    def issue(self, user_id: str, email: str, role: str = USER_ROLE) -> str:
        issued_at = int(self.clock())
        claims = {
            "sub": user_id,
            "email": email,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + int(self.ttl.total_seconds()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            # Expiry is checked below so the window is half-open: [iat, exp)
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            raise InvalidToken()

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidToken()
        if self.clock() >= exp:
            raise ExpiredToken()

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            raise InvalidToken()
        return Identity(user_id=user_id, email=email, role=payload.get("role", USER_ROLE))


# ---------------- DEPENDENCIES ----------------
def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_current_user(
    request: Request,
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Verify the bearer token and return the caller's identity."""
    if not bearer or not bearer.credentials:
        raise Unauthenticated()
    identity = tokens.verify(bearer.credentials)
    request.state.identity = identity
    return identity


def require_admin(identity: Identity = Depends(get_current_user)) -> Identity:
    if not identity.is_admin:
        raise Forbidden()
    return identity
