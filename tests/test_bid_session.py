"""
Tests for the front-end session: amount parsing, dictation splitting, submit outcomes.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from src.domains.bidding import AmountParseError, Bid, BidController
from src.services.bid_session import (
    INVALID_BID_MESSAGE,
    PARSE_ERROR_MESSAGE,
    BidLog,
    BidSession,
    Outcome,
    parse_amount,
    split_spoken_bid,
)


@pytest.mark.parametrize(
    "text, expected",
    [("100", 100.0), (" 12.5 ", 12.5), ("-5", -5.0), ("0", 0.0), ("1e3", 1000.0)],
)
def test_parse_amount(text: str, expected: float) -> None:
    """parse_amount accepts any number text, including non-positive ones."""
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "   ", None, "12abc", "$100", "1_000"])
def test_parse_amount_rejects_non_numbers(text: str | None) -> None:
    """parse_amount raises AmountParseError for empty or non-numeric text."""
    with pytest.raises(AmountParseError):
        parse_amount(text)


def test_amount_parse_error_is_value_error() -> None:
    """AmountParseError keeps the offending text and is a ValueError."""
    with pytest.raises(ValueError) as exc_info:
        parse_amount("abc")
    assert exc_info.value.text == "abc"


@pytest.mark.parametrize(
    "transcript, expected",
    [
        ("Alice 100", ("Alice", "100")),
        ("Alice bids 100 dollars", ("Alice", "100")),
        ("Bob bids $1,250.50", ("Bob", "1250.50")),
        ("Carol offers a bid of 75", ("Carol", "75")),
        ("Mary Jane, 40", ("Mary Jane", "40")),
        ("Bob -5", ("Bob", "-5")),
        ("Bob bids .5", ("Bob", ".5")),
        ("Bob minus 5", ("Bob", "-5")),
        ("Carol offers -$1,000.25", ("Carol", "-1000.25")),
        ("just a name", ("just a name", "")),
        ("", ("", "")),
        (None, ("", "")),
    ],
)
def test_split_spoken_bid(transcript: str | None, expected: tuple[str, str]) -> None:
    """split_spoken_bid takes the last number as the amount and the words before it as the name."""
    assert split_spoken_bid(transcript) == expected


def test_bid_log_appends_display_lines() -> None:
    """BidLog keeps one '<name> - $<amount>' line per notification."""
    log = BidLog()
    log.on_bid_placed(Bid("Alice", 100.0))
    log.on_bid_placed(Bid("Bob", 2.5))
    assert log.lines == ["Alice - $100.0", "Bob - $2.5"]
    assert log.as_text() == "Alice - $100.0\nBob - $2.5\n"


def test_submit_accepted() -> None:
    """A valid submission is stored, logged, and clears the inputs."""
    session = BidSession()
    result = session.submit("Alice", "100.0")
    assert result.outcome is Outcome.ACCEPTED
    assert result.clear_inputs is True
    assert result.bid == Bid("Alice", 100.0)
    assert session.log.lines == ["Alice - $100.0"]
    assert session.controller.repository.get_all_bids() == (Bid("Alice", 100.0),)


@pytest.mark.parametrize("name, amount_text", [("  ", "50.0"), ("Bob", "-5.0"), ("Bob", "0")])
def test_submit_rejected(name: str, amount_text: str) -> None:
    """A parsed but invalid bid shows 'Invalid Bid!', stores nothing, and clears the inputs."""
    session = BidSession()
    result = session.submit(name, amount_text)
    assert result.outcome is Outcome.REJECTED
    assert result.message == INVALID_BID_MESSAGE
    assert result.clear_inputs is True
    assert result.bid is not None
    assert session.log.lines == []
    assert len(session.controller.repository) == 0


def test_submit_parse_error_never_calls_controller() -> None:
    """Amount text 'abc' yields the parse message and the controller is never invoked."""
    controller = MagicMock()
    session = BidSession(controller=controller)
    result = session.submit("Alice", "abc")
    assert result.outcome is Outcome.PARSE_ERROR
    assert result.message == PARSE_ERROR_MESSAGE
    assert result.clear_inputs is False
    controller.place_bid.assert_not_called()


def test_submit_mixed_sequence_keeps_only_accepted() -> None:
    """Only accepted bids reach the log, in submission order."""
    session = BidSession()
    session.submit("Alice", "100")
    session.submit("", "10")
    session.submit("Bob", "abc")
    session.submit("Carol", "7.25")
    assert session.log.lines == ["Alice - $100.0", "Carol - $7.25"]


def test_extra_observer_receives_session_bids() -> None:
    """Observers added to the session's controller are notified after the log."""
    controller = BidController()
    session = BidSession(controller=controller)
    observer = MagicMock()
    controller.add_observer(observer)

    result = session.submit("Alice", "5")

    assert result.outcome is Outcome.ACCEPTED
    observer.on_bid_placed.assert_called_once_with(Bid("Alice", 5.0))
    assert controller.observers[0] is session.log


@pytest.mark.parametrize("phrase", ["Bob -5", "Bob minus 5", "Bob bids negative 12.5"])
def test_dictated_negative_amount_is_rejected(phrase: str) -> None:
    """A spoken negative amount keeps its sign through to the validator and is rejected."""
    session = BidSession()
    name, amount_text = split_spoken_bid(phrase)
    result = session.submit(name, amount_text)
    assert result.outcome is Outcome.REJECTED
    assert result.bid is not None and result.bid.amount < 0
    assert session.log.lines == []


def test_dictated_fraction_keeps_its_value() -> None:
    """'.5' is placed as half a dollar, not five."""
    session = BidSession()
    result = session.submit(*split_spoken_bid("Bob bids .5"))
    assert result.outcome is Outcome.ACCEPTED
    assert session.log.lines == ["Bob - $0.5"]


def test_injected_controller_rejection_reports_bid_and_logs_once(caplog: pytest.LogCaptureFixture) -> None:
    """With an injected controller the rejected bid is still reported and logged a single time."""
    session = BidSession(controller=BidController())
    with caplog.at_level("DEBUG", logger="bidding_app"):
        result = session.submit("  Bob ", "-5")
    assert result.outcome is Outcome.REJECTED
    assert result.bid == Bid("Bob", -5.0)
    assert len(caplog.records) == 1
    assert "Invalid Bid!" in caplog.records[0].getMessage()


def test_own_controller_rejection_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    """The session's own rejection handler is the only place a rejection is logged."""
    session = BidSession()
    with caplog.at_level("DEBUG", logger="bidding_app"):
        result = session.submit("", "10")
    assert result.bid == Bid("", 10.0)
    assert len(caplog.records) == 1
    assert caplog.records[0].levelname == "WARNING"
