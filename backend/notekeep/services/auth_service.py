"""
Notekeep Backend — Authentication Service
===========================================

What:  Password hashing and bearer token issuance/verification.
How:   Passwords: PBKDF2-HMAC-SHA256 with a random 16-byte salt, stored as
           pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>
       Tokens: HS256 JSON Web Tokens (PyJWT) carrying `username`, `id`
           and an `exp` claim, signed with settings.secret_key.
Who:   Used by the users/login routes and the current-user dependency.

Security:
    Plaintext passwords and tokens are never logged.
"""

import base64
import hashlib
import hmac
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from notekeep.config import settings
from notekeep.exceptions import AuthenticationError
from notekeep.models.user import User

logger = logging.getLogger(__name__)

HASH_SCHEME = "pbkdf2_sha256"
TOKEN_ALGORITHM = "HS256"


def _pbkdf2_sha256(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


class AuthService:
    """
    Stateless credential helper.

    Responsibilities:
        - hash_password() / verify_password(): credential storage
        - issue_token() / decode_token(): bearer tokens
        - extract_bearer(): parse the Authorization header
    """

    def __init__(self, secret_key: Optional[str] = None, iterations: Optional[int] = None):
        self._secret_key = secret_key
        self._iterations = iterations

    @property
    def secret_key(self) -> str:
        return self._secret_key or settings.secret_key

    @property
    def iterations(self) -> int:
        return self._iterations or settings.password_hash_iterations

    # ── Passwords ─────────────────────────────────────────────────────────

    def hash_password(self, password: str) -> str:
        salt = os.urandom(16)
        dk = _pbkdf2_sha256(password, salt, self.iterations)
        return (
            f"{HASH_SCHEME}${self.iterations}$"
            f"{base64.b64encode(salt).decode()}${base64.b64encode(dk).decode()}"
        )

    def verify_password(self, password: str, stored: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Unknown schemes and corrupt hashes verify as False.
        """
        if not stored or not stored.startswith(f"{HASH_SCHEME}$"):
            return False
        try:
            _, iters_s, salt_b64, hash_b64 = stored.split("$", 3)
            iterations = int(iters_s)
            salt = base64.b64decode(salt_b64)
            expected = base64.b64decode(hash_b64)
        except (ValueError, TypeError):
            logger.warning("Stored password hash is malformed")
            return False
        calc = _pbkdf2_sha256(password, salt, iterations)
        return hmac.compare_digest(calc, expected)

    # ── Tokens ────────────────────────────────────────────────────────────

    def issue_token(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "username": user.username,
            "id": user.id,
            "iat": now,
            "exp": now + timedelta(seconds=settings.token_expires_in),
        }
        return jwt.encode(payload, self.secret_key, algorithm=TOKEN_ALGORITHM)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a token's signature and expiry.

        Raises:
            AuthenticationError: "token expired" or "token invalid"
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("token expired")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("token invalid", context={"reason": type(e).__name__})

        if not payload.get("id"):
            raise AuthenticationError("token invalid", context={"reason": "missing id claim"})
        return payload

    @staticmethod
    def extract_bearer(authorization: Optional[str]) -> Optional[str]:
        """
        Returns the token from an `Authorization: Bearer <token>` header.

        Returns None when the header is absent or uses another scheme.
        """
        if not authorization:
            return None
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return token.strip()


# ── Singleton Instance ────────────────────────────────────────────────────
auth_service = AuthService()
