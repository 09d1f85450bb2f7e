from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt
from fastapi import Header, HTTPException, Request, status
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from .config import Settings
from .schemas import TokenClaims

logger = logging.getLogger(__name__)

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a token cannot be decoded into usable claims."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # Oversized input is a failed match, same as any wrong password
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordSizeError:
        return False


def create_access_token(user_id: int, settings: Settings, now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "iat": issued_at, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Verify a token's signature and expiry and return its claims.

    Args:
        token: Compact JWT string
        settings: Settings carrying the signing secret and algorithm

    Returns:
        TokenClaims with the user id and issue/expiry times

    Raises:
        InvalidTokenError: If the signature, expiry or claim shape is bad
    """
    try:
        data = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "iat", "exp"]}
        )
        return TokenClaims(
            user_id=int(data["sub"]),
            issued_at=datetime.fromtimestamp(data["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc)
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise InvalidTokenError(str(exc)) from exc


def require_token(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> TokenClaims:
    """
    Guard for protected routes.

    Missing header or token segment -> 401 "Access Denied".
    Wrong scheme, bad signature, malformed or expired token -> 400 "Invalid Token".
    On success the claims are also stored on request.state.claims.
    """
    parts = authorization.split(" ", 1) if authorization else []
    if len(parts) < 2 or not parts[1].strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access Denied")

    scheme, token = parts[0], parts[1].strip()
    if scheme.lower() != "bearer":
        logger.warning("Rejected token with unsupported scheme %r on %s", scheme, request.url.path)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Token")

    try:
        claims = decode_access_token(token, request.app.state.settings)
    except InvalidTokenError as exc:
        logger.warning("Rejected token on %s: %s", request.url.path, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Token") from exc

    request.state.claims = claims
    return claims
