"""Wire models."""

from kungfu import Ok, Error

from onespan_nodes.client import ErrorReply, RiskReply, TransactionRequest, decode
from onespan_nodes.errors import ParseError


def test_transaction_request_uses_wire_names() -> None:
    request = TransactionRequest.build(
        attributes={"amount": "10", "currency": "EUR"},
        username="alice",
        application_ref="app",
        session_id="s-1",
        ip="10.0.0.1",
        fingerprint_hash="h",
        fingerprint_raw="raw",
    )

    body = request.to_body()

    assert list(body)[:2] == ["amount", "currency"]
    assert body["relationshipRef"] == "alice"
    assert body["applicationRef"] == "app"
    assert body["sessionID"] == "s-1"
    assert body["cddc"] == {"ipAddress": "10.0.0.1", "browserCDDC": {"fingerprintRaw": "raw", "fingerprintHash": "h"}}


class TestErrorReply:
    def test_first_validation_message(self) -> None:
        reply = ErrorReply.model_validate(
            {"message": "Invalid", "validationErrors": [{"message": "first"}, {"message": "second"}]}
        )

        assert reply.validation_message == "first"

    def test_no_validation_errors(self) -> None:
        assert ErrorReply.model_validate({"message": "Invalid"}).validation_message is None
        assert ErrorReply.model_validate({"message": "Invalid", "validationErrors": []}).validation_message is None


class TestDecode:
    def test_ok(self) -> None:
        match decode(RiskReply, {"riskResponseCode": 2}):
            case Ok(reply):
                assert reply.risk_response_code == 2
            case Error(e):
                raise AssertionError(str(e))

    def test_missing_field(self) -> None:
        match decode(RiskReply, {"other": 1}):
            case Error(ParseError(payload=payload)):
                assert payload == {"other": 1}
            case result:
                raise AssertionError(f"expected ParseError, got {result!r}")
