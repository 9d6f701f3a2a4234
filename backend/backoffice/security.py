"""
Back Office Backend — Bearer Token Authentication
===================================================

What:  HS256 JSON Web Token verification and the FastAPI dependency that
       turns an `Authorization: Bearer <token>` header into a `Principal`.
Why:   Every catalog, payment plan and unit measure endpoint requires an
       authenticated caller. Tokens are issued elsewhere; this service only
       verifies them.
How:   header.payload.signature, each part base64url-encoded, signature is
       HMAC-SHA256 over "header.payload" with the shared secret from settings.
       `exp` is mandatory; `iss` / `aud` are checked when configured.

Claims read:
    sub         → Principal.subject
    email       → Principal.email
    roles       → Principal.roles (list, or a JSON-encoded list; items may be
                  plain ids/names or objects with a "name" or "id")
    systemRole  → Principal.system_role
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backoffice.config import settings
from backoffice.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as described by a verified token."""

    subject: str
    email: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    system_role: Optional[str] = None


# ── Token Segments ────────────────────────────────────────────────────────
# A token is three unpadded base64url segments: header, claims, signature.

def _encode_segment(obj: Dict[str, Any]) -> str:
    raw = json.dumps(obj, separators=(",", ":"), sort_keys=True).encode()
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode_segment(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _signature(signing_input: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), signing_input.encode(), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


def create_access_token(
    claims: Dict[str, Any],
    expires_in: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    """
    Create a signed token carrying `claims` plus an `exp` timestamp.

    Used by the test suite and local tooling; the API itself exposes no
    token issuance endpoint.

    Args:
        claims:     Payload to embed (e.g. {"sub": "42", "roles": ["admin"]}).
        expires_in: Lifetime in seconds. Negative values produce an already
                    expired token. Defaults to settings.jwt_expire_minutes.
        secret:     Signing key override. Defaults to settings.jwt_secret_key.
    """
    if expires_in is None:
        expires_in = settings.jwt_expire_minutes * 60
    defaults = {"iss": settings.jwt_issuer, "aud": settings.jwt_audience}
    payload = {name: value for name, value in defaults.items() if value}
    payload.update(claims)
    payload["exp"] = int(time.time()) + expires_in

    signing_input = ".".join(
        [_encode_segment({"alg": settings.jwt_algorithm, "typ": "JWT"}), _encode_segment(payload)]
    )
    return f"{signing_input}.{_signature(signing_input, secret or settings.jwt_secret_key)}"


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a token and return its payload.

    Raises:
        AuthenticationError: with a reason of "malformed_token",
            "invalid_signature", "expired_token", "invalid_issuer" or
            "invalid_audience".
    """
    signing_input, _, signature = token.rpartition(".")
    if signing_input.count(".") != 1 or not signature:
        raise AuthenticationError("malformed_token")
    header_segment, payload_segment = signing_input.split(".")

    try:
        header = json.loads(_decode_segment(header_segment))
        payload = json.loads(_decode_segment(payload_segment))
    except ValueError:
        # binascii.Error, UnicodeDecodeError and JSONDecodeError are all ValueErrors
        raise AuthenticationError("malformed_token")

    if not isinstance(header, dict) or header.get("alg") != "HS256":
        raise AuthenticationError("malformed_token")

    expected = _signature(signing_input, settings.jwt_secret_key)
    if not hmac.compare_digest(expected.encode(), signature.encode()):
        raise AuthenticationError("invalid_signature")

    if not isinstance(payload, dict):
        raise AuthenticationError("malformed_token")

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or exp < time.time():
        raise AuthenticationError("expired_token")

    if settings.jwt_issuer and payload.get("iss") != settings.jwt_issuer:
        raise AuthenticationError("invalid_issuer")

    if settings.jwt_audience:
        aud = payload.get("aud")
        audiences = aud if isinstance(aud, list) else [aud]
        if settings.jwt_audience not in audiences:
            raise AuthenticationError("invalid_audience")

    return payload


def _normalize_roles(raw: Any) -> List[str]:
    """Accepts a list or a JSON-encoded list of ids, names or role objects."""
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return [raw]
    if not isinstance(raw, list):
        raw = [raw]

    roles: List[str] = []
    for item in raw:
        if isinstance(item, dict):
            value = item.get("name", item.get("id"))
            if value is not None:
                roles.append(str(value))
        elif item is not None:
            roles.append(str(item))
    return roles


def principal_from_claims(payload: Dict[str, Any]) -> Principal:
    subject = payload.get("sub")
    if subject is None:
        raise AuthenticationError("missing_subject")
    system_role = payload.get("systemRole")
    return Principal(
        subject=str(subject),
        email=payload.get("email"),
        roles=_normalize_roles(payload.get("roles")),
        system_role=str(system_role) if system_role is not None else None,
    )


bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """
    FastAPI dependency: the authenticated caller, or 401.

    Usage:
        @router.get("/bank-entities")
        async def list_bank_entities(principal: Principal = Depends(get_current_principal)):
            ...
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("missing_token")
    payload = decode_access_token(credentials.credentials)
    principal = principal_from_claims(payload)
    logger.debug("Authenticated subject=%s roles=%s", principal.subject, principal.roles)
    return principal


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """Like get_current_principal, but anonymous callers and bad tokens yield None."""
    if credentials is None or not credentials.credentials:
        return None
    try:
        return principal_from_claims(decode_access_token(credentials.credentials))
    except AuthenticationError as exc:
        logger.info("Ignoring unusable bearer token: %s", exc.reason)
        return None
