"""Build the claim set for a token from user options."""

import logging
import math
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from jwt_kit.claims.duration import parse_duration
from jwt_kit.claims.fake import BeerOracle
from jwt_kit.claims.types import IssueConfig
from jwt_kit.core.errors import ClaimsValidationError, DurationError
from jwt_kit.crypto.keys import get_key_material

RESERVED_CLAIMS = frozenset({"iss", "sub", "aud", "exp", "scopes", "beer_of_the_day"})

logger = logging.getLogger(__name__)


class StringOracle(Protocol):
    """Source of whimsical claim values."""

    def produce_string(self) -> str: ...


def parse_claim_args(raw_claims: list[str], errors: list[str]) -> dict[str, str]:
    """Split ``key=value`` strings on the first ``=``, recording bad ones."""
    parsed: dict[str, str] = {}
    for raw in raw_claims:
        key, sep, value = raw.partition("=")
        if not sep or not key or not value:
            errors.append(f"arg '{raw}' must be in format key=value")
            continue
        parsed[key] = value
    return parsed


def _parse_expiry(expires_in: str, errors: list[str]) -> timedelta | None:
    try:
        return parse_duration(expires_in)
    except DurationError as exc:
        errors.append(f"invalid time duration '{expires_in}': {exc}")
        return None


def assemble_claims(
    config: IssueConfig,
    *,
    now: datetime | None = None,
    oracle: StringOracle | None = None,
) -> dict[str, Any]:
    """Merge user claims with the reserved claims.

    All input problems are collected and raised together as a
    ``ClaimsValidationError``. Reserved claims are written after user
    claims, so a user claim with a reserved name never survives.
    """
    errors: list[str] = []
    claims: dict[str, Any] = dict(parse_claim_args(config.claims, errors))
    duration = _parse_expiry(config.expires_in, errors)
    if errors or duration is None:
        raise ClaimsValidationError(errors)

    shadowed = sorted(RESERVED_CLAIMS.intersection(claims))
    if shadowed:
        logger.info("reserved claims override user values: %s", ", ".join(shadowed))

    source = oracle if oracle is not None else BeerOracle.seeded()
    issued_at = now if now is not None else datetime.now(UTC)

    claims["beer_of_the_day"] = source.produce_string()
    claims["iss"] = get_key_material().issuer
    claims["sub"] = config.subject
    claims["aud"] = list(config.audiences)
    claims["exp"] = math.floor((issued_at + duration).timestamp())
    claims["scopes"] = list(config.scopes)
    return claims
