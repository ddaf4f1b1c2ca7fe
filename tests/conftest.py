"""Shared test fixtures for jwt-kit."""

import pytest

from jwt_kit.crypto.jwt_manager import JWTManager

SETTINGS_ENV_VARS = (
    "JWT_KIT_SUBJECT",
    "JWT_KIT_AUDIENCES",
    "JWT_KIT_EXPIRES_IN",
    "JWT_KIT_LOG_LEVEL",
)


class FixedOracle:
    """Oracle that always produces the same beer."""

    value = "Pliny The Elder"

    def produce_string(self) -> str:
        return self.value


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jwt_mgr() -> JWTManager:
    """Manager around the embedded keypair."""
    return JWTManager.from_embedded()


@pytest.fixture
def oracle() -> FixedOracle:
    return FixedOracle()
