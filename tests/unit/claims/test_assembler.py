"""Tests for claim assembly."""

from datetime import UTC, datetime

import pytest

from jwt_kit.claims.assembler import RESERVED_CLAIMS, assemble_claims
from jwt_kit.claims.fake import BEER_NAMES
from jwt_kit.claims.types import IssueConfig
from jwt_kit.core.errors import ClaimsValidationError
from jwt_kit.crypto.keys import ISSUER

NOW = datetime(2024, 1, 1, tzinfo=UTC)
NOW_UNIX = 1_704_067_200


class TestReservedClaims:
    """Reserved claims are always present and always win."""

    def test_defaults(self, oracle) -> None:
        claims = assemble_claims(IssueConfig(), now=NOW, oracle=oracle)
        assert claims == {
            "beer_of_the_day": oracle.value,
            "iss": ISSUER,
            "sub": "glooey@solo.io",
            "aud": ["https://fake-resource.solo.io"],
            "exp": NOW_UNIX + 8766 * 3600,
            "scopes": [],
        }

    def test_exp_is_integer_offset(self, oracle) -> None:
        config = IssueConfig(expires_in="1h")
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["exp"] == NOW_UNIX + 3600
        assert isinstance(claims["exp"], int)

    def test_exp_floors_fractional_seconds(self, oracle) -> None:
        now = datetime(2024, 1, 1, 0, 0, 0, 900_000, tzinfo=UTC)
        claims = assemble_claims(IssueConfig(expires_in="1s"), now=now, oracle=oracle)
        assert claims["exp"] == NOW_UNIX + 1

    def test_user_cannot_shadow(self, oracle) -> None:
        config = IssueConfig(
            claims=[f"{name}=user-value" for name in sorted(RESERVED_CLAIMS)],
            subject="victim",
        )
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["iss"] == ISSUER
        assert claims["sub"] == "victim"
        assert claims["beer_of_the_day"] == oracle.value
        assert claims["aud"] == ["https://fake-resource.solo.io"]
        assert claims["scopes"] == []
        assert isinstance(claims["exp"], int)

    def test_scopes_and_audiences_keep_order(self, oracle) -> None:
        config = IssueConfig(scopes=["write", "read"], audiences=["b", "a"])
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["scopes"] == ["write", "read"]
        assert claims["aud"] == ["b", "a"]

    def test_lists_are_copies(self, oracle) -> None:
        config = IssueConfig(scopes=["read"])
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        claims["scopes"].append("admin")
        assert config.scopes == ["read"]

    def test_seeds_real_oracle(self) -> None:
        claims = assemble_claims(IssueConfig(), now=NOW)
        assert claims["beer_of_the_day"] in BEER_NAMES


class TestUserClaims:
    """Tests for key=value claim parsing."""

    def test_adds_string_claims(self, oracle) -> None:
        config = IssueConfig(claims=["foo=bar", "baz=qux"])
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["foo"] == "bar"
        assert claims["baz"] == "qux"

    def test_splits_on_first_equals(self, oracle) -> None:
        config = IssueConfig(claims=["k=a=b"])
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["k"] == "a=b"

    def test_later_duplicate_wins(self, oracle) -> None:
        config = IssueConfig(claims=["role=viewer", "role=admin"])
        claims = assemble_claims(config, now=NOW, oracle=oracle)
        assert claims["role"] == "admin"

    @pytest.mark.parametrize("raw", ["notakeyvalue", "=value", "key=", "="])
    def test_rejects_malformed(self, oracle, raw: str) -> None:
        with pytest.raises(ClaimsValidationError) as exc_info:
            assemble_claims(IssueConfig(claims=[raw]), now=NOW, oracle=oracle)
        assert exc_info.value.errors == [f"arg '{raw}' must be in format key=value"]


class TestValidationErrors:
    """All input errors are reported together."""

    def test_invalid_duration(self, oracle) -> None:
        with pytest.raises(ClaimsValidationError) as exc_info:
            assemble_claims(IssueConfig(expires_in="forever"), now=NOW, oracle=oracle)
        assert str(exc_info.value) == (
            "claims validation errors: "
            "invalid time duration 'forever': invalid duration \"forever\""
        )

    def test_aggregates_claims_and_duration(self, oracle) -> None:
        config = IssueConfig(claims=["bad", "ok=1", "also-bad"], expires_in="1")
        with pytest.raises(ClaimsValidationError) as exc_info:
            assemble_claims(config, now=NOW, oracle=oracle)
        assert exc_info.value.errors == [
            "arg 'bad' must be in format key=value",
            "arg 'also-bad' must be in format key=value",
            "invalid time duration '1': missing unit in duration \"1\"",
        ]
