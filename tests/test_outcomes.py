"""Outcome parsing and edges."""

from kungfu import Ok, Error

from onespan_nodes.errors import ParseError
from onespan_nodes.nodes import ActivationStatus, RiskOutcome, SessionStatus, TreeContext, edges


def test_parse_is_exact() -> None:
    match SessionStatus.parse("accepted"):
        case Ok(status):
            assert status is SessionStatus.accepted
        case Error(e):
            raise AssertionError(str(e))

    for value in ("Accepted", " accepted", None, 1):
        match SessionStatus.parse(value):
            case Error(ParseError(payload=payload)):
                assert payload == value
            case result:
                raise AssertionError(f"expected ParseError, got {result!r}")


def test_labels() -> None:
    assert [e.label for e in edges(ActivationStatus)] == ["Pending", "Activated", "Timeout", "Unknown", "Error"]
    assert edges(RiskOutcome)[0].id == "Accept"


def test_tree_context_wraps_values() -> None:
    context = TreeContext.of({"username": "alice"})

    assert context.shared_state.username == "alice"
    assert TreeContext.of().shared_state.snapshot() == {}
