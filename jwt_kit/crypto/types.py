"""Type definitions for key material, JWKS, and inspected tokens."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class KeyMaterial(BaseModel):
    """The embedded RSA keypair and the identity it is published under."""

    model_config = ConfigDict(frozen=True)

    kid: str
    issuer: str
    jwks_url: str
    private_key_pem: str
    public_key_pem: str


class JWKEntry(BaseModel):
    """Single JWK entry in a JWKS document."""

    kty: str = "RSA"
    use: str = "sig"
    alg: str = "RS256"
    kid: str
    n: str
    e: str


class JWKSResponse(BaseModel):
    """JSON Web Key Set document."""

    keys: list[JWKEntry]


class InspectedToken(BaseModel):
    """A parsed token whose signature has been verified."""

    header: dict[str, Any]
    claims: dict[str, Any]
    signature: str
    signature_valid: bool = True
