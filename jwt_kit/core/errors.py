"""Exception hierarchy for token issuance and inspection."""


class JwtKitError(Exception):
    """Base class for operational errors reported to the CLI user."""


class ClaimsValidationError(JwtKitError):
    """One or more user inputs could not be turned into claims."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"claims validation errors: {'; '.join(self.errors)}")


class DurationError(JwtKitError, ValueError):
    """A duration string does not match the duration grammar."""


class TokenSigningError(JwtKitError):
    """The signer failed to produce a token."""


class TokenInspectionError(JwtKitError):
    """A token could not be parsed or its signature did not verify."""


class TokenEncodingError(JwtKitError):
    """A value could not be rendered as JSON."""


class InternalInconsistencyError(JwtKitError):
    """A token minted by this process failed its own inspection."""


class KeyMaterialError(RuntimeError):
    """The embedded keypair is unusable."""


class ConfigurationError(JwtKitError):
    """Environment settings could not be loaded."""
