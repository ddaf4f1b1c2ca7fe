"""JWT creation and verification using RS256."""

import logging
from collections.abc import Mapping
from typing import Any

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from jwt.types import Options

from jwt_kit.core.errors import (
    TokenEncodingError,
    TokenInspectionError,
    TokenSigningError,
)
from jwt_kit.crypto.keys import get_key_material, get_private_key, get_public_key
from jwt_kit.crypto.types import InspectedToken

ALGORITHM = "RS256"
TOKEN_TYPE = "JWT"
TOKEN_SEGMENTS = 3

logger = logging.getLogger(__name__)


class JWTManager:
    """Signs claim sets and verifies the resulting RS256 tokens."""

    def __init__(
        self,
        private_key: RSAPrivateKey,
        public_key: RSAPublicKey,
        kid: str,
        issuer: str,
    ) -> None:
        self._private_key = private_key
        self._public_key = public_key
        self._kid = kid
        self._issuer = issuer

    @classmethod
    def from_embedded(cls) -> "JWTManager":
        """Build a manager around the embedded development keypair."""
        material = get_key_material()
        return cls(
            private_key=get_private_key(),
            public_key=get_public_key(),
            kid=material.kid,
            issuer=material.issuer,
        )

    def build_header(self) -> dict[str, str]:
        """JOSE header for every token this manager signs."""
        return {"alg": ALGORITHM, "typ": TOKEN_TYPE, "kid": self._kid}

    def sign(self, claims: Mapping[str, Any]) -> str:
        """Serialize and sign claims as a compact RS256 JWT."""
        try:
            token = jwt.encode(
                dict(claims),
                self._private_key,
                algorithm=ALGORITHM,
                headers=self.build_header(),
            )
        except TypeError as exc:
            raise TokenEncodingError(f"claims are not JSON serializable: {exc}") from exc
        except (jwt.PyJWTError, ValueError) as exc:
            raise TokenSigningError(f"failed to sign token: {exc}") from exc
        logger.debug("signed token kid=%s claims=%s", self._kid, sorted(claims))
        return token

    def inspect(self, token: str) -> InspectedToken:
        """Parse a compact token and verify its RS256 signature."""
        if token.count(".") != TOKEN_SEGMENTS - 1:
            raise TokenInspectionError(
                f"malformed token: expected {TOKEN_SEGMENTS} segments"
            )
        try:
            header = jwt.get_unverified_header(token)
        except jwt.DecodeError as exc:
            raise TokenInspectionError(f"malformed token: {exc}") from exc

        alg = header.get("alg")
        if alg != ALGORITHM:
            raise TokenInspectionError(f"unexpected method: {alg}")

        # only exp and iss are enforced; other registered claims may be user strings
        opts: Options = {
            "verify_aud": False,
            "verify_iat": False,
            "verify_nbf": False,
        }
        try:
            claims = jwt.decode(
                token,
                self._public_key,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                options=opts,
            )
        except jwt.InvalidSignatureError as exc:
            raise TokenInspectionError("signature is invalid") from exc
        except jwt.ExpiredSignatureError as exc:
            raise TokenInspectionError("token is expired") from exc
        except jwt.DecodeError as exc:
            raise TokenInspectionError(f"malformed token: {exc}") from exc
        except jwt.PyJWTError as exc:
            raise TokenInspectionError(f"token rejected: {exc}") from exc

        return InspectedToken(
            header=header,
            claims=claims,
            signature=token.rsplit(".", 1)[1],
        )
