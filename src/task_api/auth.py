"""Credential verification for protected routes.

The credential is the raw value of the ``Authorization`` header. A
``Bearer `` prefix is not stripped, so clients send the bare token.
"""

import logging
from typing import Any, Dict, Optional, Sequence

import jwt
from fastapi import Header, Request

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "No token provided"
INVALID_TOKEN_MESSAGE = "Failed to authenticate token"


class AuthenticationError(Exception):
    """Raised when a request carries no credential or an invalid one."""

    status_code = 401

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TokenVerifier:
    """Verifies signed credentials against the server-held secret.

    Only the signature and, when present, the expiry are checked. The
    claims are returned but never evaluated against an access policy.
    """

    def __init__(self, secret: Optional[str], algorithms: Sequence[str] = ("HS256",)):
        self.secret = secret
        self.algorithms = list(algorithms)

    def verify(self, raw_token: Optional[str]) -> Dict[str, Any]:
        """Return the credential's claims or raise AuthenticationError."""
        if not raw_token:
            logger.warning("Rejected request: no credential")
            raise AuthenticationError(NO_TOKEN_MESSAGE)
        if not self.secret:
            logger.warning("Rejected request: no signing secret configured")
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        try:
            return jwt.decode(raw_token, self.secret, algorithms=self.algorithms)
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected request: {e}")
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e

    def issue_token(self, claims: Dict[str, Any]) -> str:
        """Sign ``claims`` with the shared secret."""
        if not self.secret:
            raise ValueError("Cannot issue a credential without a signing secret")
        return jwt.encode(claims, self.secret, algorithm=self.algorithms[0])


def require_token(request: Request, authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """FastAPI dependency guarding a route with the application's verifier."""
    verifier: TokenVerifier = request.app.state.token_verifier
    return verifier.verify(authorization)
