"""Tests for the error hierarchy."""

from jwt_kit.core.errors import ClaimsValidationError, DurationError, JwtKitError


class TestClaimsValidationError:
    """Tests for aggregated validation messages."""

    def test_joins_messages(self) -> None:
        err = ClaimsValidationError(["first", "second"])
        assert str(err) == "claims validation errors: first; second"
        assert err.errors == ["first", "second"]

    def test_single_message(self) -> None:
        assert str(ClaimsValidationError(["only"])) == "claims validation errors: only"


class TestDurationError:
    """DurationError is both operational and a ValueError."""

    def test_is_value_error(self) -> None:
        err = DurationError("bad")
        assert isinstance(err, ValueError)
        assert isinstance(err, JwtKitError)
