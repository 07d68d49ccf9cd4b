"""Random state, nonce and PKCE generation."""

from __future__ import annotations

import base64
import hashlib
import secrets

from .models import PKCEPair

DEFAULT_LENGTH = 32


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def generate_state(length: int = DEFAULT_LENGTH) -> str:
    """Return `length` random bytes as unpadded URL-safe base64."""
    return _b64url(secrets.token_bytes(length))


def generate_nonce(length: int = DEFAULT_LENGTH) -> str:
    """Return a random OpenID Connect nonce; same encoding as `generate_state`."""
    return _b64url(secrets.token_bytes(length))


def compute_code_challenge(code_verifier: str) -> str:
    """S256 challenge for a PKCE verifier (RFC 7636 section 4.2)."""
    return _b64url(hashlib.sha256(code_verifier.encode("ascii")).digest())


def generate_pkce() -> PKCEPair:
    """Generate a PKCE verifier (43 chars) and its S256 challenge."""
    code_verifier = _b64url(secrets.token_bytes(DEFAULT_LENGTH))
    return PKCEPair(
        code_verifier=code_verifier,
        code_challenge=compute_code_challenge(code_verifier),
        code_challenge_method="S256",
    )


__all__ = ["compute_code_challenge", "generate_nonce", "generate_pkce", "generate_state"]
