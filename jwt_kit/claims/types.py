"""Per-invocation issuance options."""

from pydantic import BaseModel, Field

from jwt_kit.core.settings import AUDIENCE_DEFAULT, EXPIRES_IN_DEFAULT, SUBJECT_DEFAULT


class IssueConfig(BaseModel):
    """Options controlling the claims and output of a single token."""

    claims: list[str] = Field(default_factory=list)
    scopes: list[str] = Field(default_factory=list)
    audiences: list[str] = Field(default_factory=lambda: [AUDIENCE_DEFAULT])
    expires_in: str = EXPIRES_IN_DEFAULT
    subject: str = SUBJECT_DEFAULT
    pretty_print: bool = False
