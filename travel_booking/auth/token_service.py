"""
Bearer token issuance and verification.

Tokens are JWTs carrying the user's email as ``sub``. The signing key is
resolved once at startup into an immutable ``SigningKey`` and handed to the
``TokenService``; a missing or weak configured secret degrades to a random
per-process key instead of failing startup.
"""

import base64
import binascii
import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

import jwt

logger = logging.getLogger(__name__)

BASE64_PREFIX = "base64:"

DEFAULT_ALGORITHM = "HS512"

# Minimum HMAC key length (bytes) for each supported algorithm
MIN_KEY_BYTES = {
    "HS256": 32,
    "HS384": 48,
    "HS512": 64,
}

class TokenError(str, Enum):
    """Reasons a token is rejected"""
    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"
    MISSING_CLAIM = "missing_claim"

@dataclass(frozen=True)
class TokenVerification:
    """Outcome of verifying a token: either a subject or an error kind"""
    subject: Optional[str] = None
    error: Optional[TokenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.subject is not None

@dataclass(frozen=True)
class SigningKey:
    """Secret material used to sign and verify tokens"""
    secret: bytes = field(repr=False)
    algorithm: str = "HS512"
    generated: bool = False

    @classmethod
    def generate(cls, algorithm: str = "HS512") -> "SigningKey":
        """Create a random key of the minimum strength for ``algorithm``"""
        algorithm = _resolve_algorithm(algorithm)
        return cls(
            secret=secrets.token_bytes(MIN_KEY_BYTES[algorithm]),
            algorithm=algorithm,
            generated=True,
        )

    @classmethod
    def from_secret(cls, secret: Optional[str], algorithm: str = "HS512") -> "SigningKey":
        """
        Derive a signing key from configured secret material.

        ``base64:``-prefixed secrets are decoded, anything else is used as
        UTF-8 bytes. When the secret is absent, undecodable or shorter than
        the algorithm requires, a random key is generated for the lifetime
        of the process; tokens it signs are not valid on other instances.
        An unsupported ``algorithm`` falls back to HS512.
        """
        algorithm = _resolve_algorithm(algorithm)
        min_bytes = MIN_KEY_BYTES[algorithm]

        if secret is None or not secret.strip():
            logger.warning(
                "JWT_SECRET is empty; generating a temporary %s key (dev only). "
                "Set a %d+ byte secret.", algorithm, min_bytes
            )
            return cls.generate(algorithm)

        if secret.startswith(BASE64_PREFIX):
            try:
                key_bytes = base64.b64decode(secret[len(BASE64_PREFIX):], validate=True)
            except (binascii.Error, ValueError) as e:
                logger.warning(
                    "Invalid JWT_SECRET format; generating a temporary key (dev only): %s", e
                )
                return cls.generate(algorithm)
        else:
            key_bytes = secret.encode("utf-8")

        if len(key_bytes) < min_bytes:
            logger.warning(
                "JWT_SECRET is %d bytes; %s requires >= %d bytes. "
                "Generating a temporary key (dev only).",
                len(key_bytes), algorithm, min_bytes
            )
            return cls.generate(algorithm)

        return cls(secret=key_bytes, algorithm=algorithm)

def _resolve_algorithm(algorithm: Optional[str]) -> str:
    if algorithm in MIN_KEY_BYTES:
        return algorithm
    logger.warning(
        "Unsupported signing algorithm %r; falling back to %s",
        algorithm, DEFAULT_ALGORITHM
    )
    return DEFAULT_ALGORITHM

class TokenService:
    """Issues and verifies signed, time-bound identity tokens"""

    def __init__(self, signing_key: SigningKey, ttl: timedelta):
        self.signing_key = signing_key
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings) -> "TokenService":
        signing_key = SigningKey.from_secret(settings.JWT_SECRET, settings.ALGORITHM)
        return cls(signing_key, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    def issue(self, subject: str) -> str:
        """Create a token for ``subject`` expiring after the configured ttl"""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.signing_key.secret, algorithm=self.signing_key.algorithm)

    def verify(self, token: str) -> TokenVerification:
        """Check signature and expiry; never raises"""
        if not isinstance(token, str) or not token:
            return TokenVerification(error=TokenError.MALFORMED)

        try:
            payload = jwt.decode(
                token,
                self.signing_key.secret,
                algorithms=[self.signing_key.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            return TokenVerification(error=TokenError.EXPIRED)
        except jwt.InvalidSignatureError:
            return TokenVerification(error=TokenError.BAD_SIGNATURE)
        except jwt.MissingRequiredClaimError:
            return TokenVerification(error=TokenError.MISSING_CLAIM)
        except jwt.InvalidTokenError:
            return TokenVerification(error=TokenError.MALFORMED)
        except Exception:
            logger.debug("Unexpected error decoding token", exc_info=True)
            return TokenVerification(error=TokenError.MALFORMED)

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return TokenVerification(error=TokenError.MISSING_CLAIM)
        return TokenVerification(subject=subject)

    def is_valid_for(self, token: str, expected_subject: str) -> bool:
        """True only for an unexpired token issued to ``expected_subject``"""
        try:
            verification = self.verify(token)
        except Exception:
            return False
        return verification.ok and verification.subject == expected_subject
