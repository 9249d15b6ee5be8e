"""
Wire models — request bodies and reply shapes of the OneSpan API.

Field aliases are the exact wire names.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from onespan_nodes._types import JsonObject
from onespan_nodes.errors import ParseError


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class CheckActivationRequest(_Wire):
    username: str
    timeout: int


class BrowserCddc(_Wire):
    fingerprint_raw: str = Field(alias="fingerprintRaw")
    fingerprint_hash: str = Field(alias="fingerprintHash")


class Cddc(_Wire):
    ip_address: str = Field(alias="ipAddress")
    browser_cddc: BrowserCddc = Field(alias="browserCDDC")


class TransactionRequest(_Wire):
    """
    Risk transaction body.

    The adaptive attributes (accountRef, amount, ...) are extra fields
    and go on the wire under their own names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    relationship_ref: str = Field(alias="relationshipRef")
    application_ref: str = Field(default="", alias="applicationRef")
    session_id: str = Field(alias="sessionID")
    cddc: Cddc

    @classmethod
    def build(
        cls,
        *,
        attributes: dict[str, str],
        username: str,
        application_ref: str,
        session_id: str,
        ip: str,
        fingerprint_hash: str,
        fingerprint_raw: str,
    ) -> TransactionRequest:
        return cls(
            **attributes,
            relationship_ref=username,
            application_ref=application_ref,
            session_id=session_id,
            cddc=Cddc(
                ip_address=ip,
                browser_cddc=BrowserCddc(
                    fingerprint_raw=fingerprint_raw,
                    fingerprint_hash=fingerprint_hash,
                ),
            ),
        )

    def to_body(self) -> dict[str, object]:
        # Adaptive attributes first, as the API documents them
        body = self.model_dump(by_alias=True)
        extras = dict(self.model_extra or {})
        return {**extras, **{k: v for k, v in body.items() if k not in extras}}


# ═══════════════════════════════════════════════════════════════════════════════
# Replies
# ═══════════════════════════════════════════════════════════════════════════════


class ActivationStatusReply(_Wire):
    activation_status: str = Field(alias="activationStatus")


class SessionStatusReply(_Wire):
    session_status: str = Field(alias="sessionStatus")


class RiskReply(_Wire):
    risk_response_code: StrictInt = Field(alias="riskResponseCode")


class ValidationDetail(_Wire):
    message: str | None = None


class ErrorReply(_Wire):
    """Application-level error body. message is mandatory."""

    message: str
    validation_errors: list[ValidationDetail] | None = Field(default=None, alias="validationErrors")

    @property
    def validation_message(self) -> str | None:
        """Message of the first validation error, if there is one."""
        if not self.validation_errors:
            return None
        return self.validation_errors[0].message


def decode[M: BaseModel](model: type[M], payload: JsonObject) -> Result[M, ParseError]:
    """Validate a decoded JSON object into a reply model."""
    try:
        return Ok(model.model_validate(payload))
    except ValidationError as e:
        return Error(ParseError(f"Fail to parse response as {model.__name__}: {e.error_count()} error(s)", dict(payload)))


__all__ = (
    "CheckActivationRequest",
    "BrowserCddc",
    "Cddc",
    "TransactionRequest",
    "ActivationStatusReply",
    "SessionStatusReply",
    "RiskReply",
    "ValidationDetail",
    "ErrorReply",
    "decode",
)
