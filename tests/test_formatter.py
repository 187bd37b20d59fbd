"""
Formatter Tests - Unit Tests for Swap Display Text

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.adapters.formatting.formatter (all formatter functions for testing)
- xswap.domain.currencies (CURRENCIES for the default selector options)
- xswap.domain.models (SwapSession, SessionState, ErrorKind for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from xswap.adapters.formatting.formatter import (
    HINT_IDLE,  # Hint shown under an idle submit button
    HINT_SUBMITTING,  # Hint shown while a swap is in flight
    SUCCESS_MESSAGE,  # Message shown after a successful swap
    currency_options,  # Currency codes with icon URLs
    exchange_rate_line,  # "1 ETH = ... USDC" line
    session_view,  # Complete render model of a session
    status_message,  # Error or success message
    usd_value_line,  # Approximate USD value line
)
from xswap.domain.currencies import CURRENCIES
from xswap.domain.models import ErrorKind, SessionState, SwapSession


class TestExchangeRateLine:
    def test_rate_line(self, catalog):
        assert exchange_rate_line("ETH", "USDC", catalog) == "1 ETH = 2000.000000 USDC"

    def test_hidden_without_amount(self, catalog):
        assert exchange_rate_line("ETH", "USDC", catalog, "") is None

    def test_hidden_without_price(self, catalog):
        assert exchange_rate_line("ETH", "BTC", catalog, "1") is None


class TestUsdValueLine:
    def test_two_decimals(self, catalog):
        assert usd_value_line("1.5", "ATOM", catalog) == "≈ $11.25 USD"

    def test_unavailable(self, catalog):
        assert usd_value_line("1", "BTC", catalog) is None


class TestStatusMessage:
    def test_error_message_verbatim(self):
        session = SwapSession(state=SessionState.FAILED, error=ErrorKind.SAME_CURRENCIES)
        assert status_message(session) == "Source and target currencies must be different"

    def test_success(self):
        session = SwapSession(state=SessionState.SUCCESS, succeeded=True)
        assert status_message(session) == SUCCESS_MESSAGE

    def test_idle(self):
        assert status_message(SwapSession.initial()) == ""


class TestSessionView:
    def test_idle_empty_session(self, catalog):
        view = session_view(SwapSession.initial(), catalog)
        assert view["state"] == "idle"
        assert view["rate_line"] is None
        assert view["from_usd"] is None
        assert view["submit_enabled"] is False
        assert view["reset_enabled"] is True
        assert view["hint"] == HINT_IDLE

    def test_successful_session(self, catalog):
        session = SwapSession(
            state=SessionState.SUCCESS,
            from_amount_text="1",
            to_amount_text="2000.000000",
            succeeded=True,
        )
        view = session_view(session, catalog)
        assert view["from_usd"] == "≈ $2000.00 USD"
        assert view["to_usd"] == "≈ $2000.00 USD"
        assert view["rate_line"] == "1 ETH = 2000.000000 USDC"
        assert view["success"] == SUCCESS_MESSAGE
        assert view["error"] == ""
        assert view["submit_enabled"] is True

    def test_submitting_session_disables_buttons(self, catalog):
        session = SwapSession(state=SessionState.SUBMITTING, from_amount_text="1")
        view = session_view(session, catalog)
        assert view["submit_enabled"] is False
        assert view["reset_enabled"] is False
        assert view["hint"] == HINT_SUBMITTING

    def test_invalid_amount_hides_usd_value(self, catalog):
        view = session_view(SwapSession(from_amount_text="-3"), catalog)
        assert view["from_usd"] is None
        assert view["submit_enabled"] is False


def test_currency_options_keep_order_and_icons():
    options = currency_options(["ETH", "STATOM"])
    assert [code for code, _ in options] == ["ETH", "STATOM"]
    assert options[1][1].endswith("/stATOM.svg")


def test_currency_options_default_to_supported_currencies():
    options = currency_options()
    codes = [code for code, _ in options]
    assert codes == list(CURRENCIES)
    assert len(codes) == 31
    assert codes[0] == "ampLUNA" and codes[-1] == "ZIL"
    assert dict(options)["STATOM"].endswith("/stATOM.svg")
    assert dict(options)["ETH"].endswith("/ETH.svg")
