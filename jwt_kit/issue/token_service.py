"""Token issuance: assemble, sign, and render for output."""

import logging
from datetime import datetime

from jwt_kit.claims.assembler import StringOracle, assemble_claims
from jwt_kit.claims.types import IssueConfig
from jwt_kit.core.errors import (
    InternalInconsistencyError,
    TokenEncodingError,
    TokenInspectionError,
)
from jwt_kit.crypto.jwt_manager import JWTManager

logger = logging.getLogger(__name__)


def issue_token(
    config: IssueConfig,
    manager: JWTManager | None = None,
    *,
    now: datetime | None = None,
    oracle: StringOracle | None = None,
) -> str:
    """Assemble claims from config and sign them."""
    jwt_mgr = manager or JWTManager.from_embedded()
    claims = assemble_claims(config, now=now, oracle=oracle)
    logger.debug("assembled claims: %s", ", ".join(sorted(claims)))
    return jwt_mgr.sign(claims)


def render(config: IssueConfig, token: str, manager: JWTManager | None = None) -> str:
    """Text to write to stdout for a freshly minted token."""
    if not config.pretty_print:
        return f"{token}\n"

    jwt_mgr = manager or JWTManager.from_embedded()
    try:
        inspected = jwt_mgr.inspect(token)
    except TokenInspectionError as exc:
        raise InternalInconsistencyError(
            f"minted token failed its own verification: {exc}"
        ) from exc
    try:
        formatted = inspected.model_dump_json(indent=2)
    except ValueError as exc:
        raise TokenEncodingError(f"failed to render token: {exc}") from exc
    return f"\n{formatted}\n"


def mint(config: IssueConfig, manager: JWTManager | None = None) -> str:
    """Issue one token and return its stdout rendering."""
    jwt_mgr = manager or JWTManager.from_embedded()
    return render(config, issue_token(config, jwt_mgr), jwt_mgr)
