"""
Price Feed Provider Tests - Unit Tests for the Price Feed Client

Tests HTTP interaction, caching behavior, error handling and catalog
construction without touching the network.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.adapters.providers.prices (PriceFeedProvider for testing)
- xswap.domain.errors (PriceFeedError)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)
from datetime import datetime, timedelta, timezone  # Date/time utilities for testing cache timestamps

from xswap.adapters.providers.prices import PriceFeedProvider  # Price feed provider to test
from xswap.domain.errors import PriceFeedError


FEED = [
    {"currency": "BLUR", "date": "2023-08-29T07:10:40.000Z", "price": 0.20811525423728813},
    {"currency": "ETH", "date": "2023-08-29T07:10:52.000Z", "price": 1645.9337373737374},
    {"currency": "USDC", "date": "2023-08-29T07:10:30.000Z", "price": 0.989832},
    {"currency": "USDC", "date": "2023-08-29T07:10:30.000Z", "price": 1.0},
]


def _response(payload):
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


@pytest.fixture(autouse=True)
def clear_provider_cache():
    PriceFeedProvider.clear_cache()
    yield
    PriceFeedProvider.clear_cache()


class TestPriceFeedProvider:
    def test_init_with_defaults(self):
        provider = PriceFeedProvider()
        assert provider.url == "https://interview.switcheo.com/prices.json"
        assert provider.timeout == 10
        assert provider.ttl.total_seconds() == 5 * 60

    def test_init_with_custom_params(self):
        provider = PriceFeedProvider(base_url="http://test.com/prices.json", timeout=3)
        assert provider.url == "http://test.com/prices.json"
        assert provider.timeout == 3

    def test_cache_valid_with_no_cache(self):
        assert not PriceFeedProvider()._cache_valid()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_get_entries_success(self, mock_get):
        mock_get.return_value = _response(FEED)

        entries = PriceFeedProvider().get_entries()

        assert entries == FEED
        mock_get.assert_called_once_with("https://interview.switcheo.com/prices.json", timeout=10)

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_get_entries_uses_cache(self, mock_get):
        mock_get.return_value = _response(FEED)

        provider = PriceFeedProvider()
        provider.get_entries()
        PriceFeedProvider().get_entries()

        mock_get.assert_called_once()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_expired_cache_refetches(self, mock_get):
        mock_get.return_value = _response(FEED)

        provider = PriceFeedProvider()
        provider.get_entries()
        _, entries = PriceFeedProvider._cache[provider.url]
        PriceFeedProvider._cache[provider.url] = (datetime.now(timezone.utc) - timedelta(minutes=6), entries)
        provider.get_entries()

        assert mock_get.call_count == 2

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_cache_is_kept_per_feed_url(self, mock_get):
        feed_a = [{"currency": "ETH", "price": 1645.93}]
        feed_b = [{"currency": "BTC", "price": 26002.82}]
        mock_get.side_effect = [_response(feed_a), _response(feed_b)]

        catalog_a = PriceFeedProvider(base_url="http://a.test/p.json").load_catalog()
        catalog_b = PriceFeedProvider(base_url="http://b.test/p.json").load_catalog()

        assert "ETH" in catalog_a and "BTC" not in catalog_a
        assert "BTC" in catalog_b and "ETH" not in catalog_b
        assert mock_get.call_count == 2
        assert [c.args[0] for c in mock_get.call_args_list] == ["http://a.test/p.json", "http://b.test/p.json"]

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_returned_entries_do_not_alias_cache(self, mock_get):
        mock_get.return_value = _response(list(FEED))

        provider = PriceFeedProvider()
        first = provider.get_entries()
        first.clear()
        second = provider.get_entries()
        second.append({"currency": "FAKE", "price": 1})

        assert provider.get_entries() == FEED
        mock_get.assert_called_once()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_non_object_entries_are_ignored(self, mock_get):
        mock_get.return_value = _response([{"currency": "ETH", "price": 1}, "junk", 3])
        assert PriceFeedProvider().get_entries() == [{"currency": "ETH", "price": 1}]

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_load_catalog_last_write_wins(self, mock_get):
        mock_get.return_value = _response(FEED)

        catalog = PriceFeedProvider().load_catalog()

        assert catalog["USDC"] == 1.0
        assert catalog["ETH"] == 1645.9337373737374
        assert len(catalog) == 3

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(PriceFeedError, match="Price feed timeout"):
            PriceFeedProvider().get_entries()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_request_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(PriceFeedError, match="Price feed request failed"):
            PriceFeedProvider().get_entries()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_http_error(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("503 Server Error")
        mock_get.return_value = mock_response

        with pytest.raises(PriceFeedError, match="Price feed HTTP error"):
            PriceFeedProvider().get_entries()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_invalid_json(self, mock_get):
        mock_response = _response(None)
        mock_response.json.side_effect = ValueError("Invalid JSON")
        mock_get.return_value = mock_response

        with pytest.raises(PriceFeedError, match="Price feed returned invalid JSON"):
            PriceFeedProvider().get_entries()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_non_list_response(self, mock_get):
        mock_get.return_value = _response({"ETH": 1645.93})

        with pytest.raises(PriceFeedError, match="non-list JSON"):
            PriceFeedProvider().get_entries()

    @patch('xswap.adapters.providers.prices.requests.get')
    def test_failed_fetch_is_not_cached(self, mock_get):
        mock_get.side_effect = [requests.exceptions.Timeout(), _response(FEED)]

        provider = PriceFeedProvider()
        with pytest.raises(PriceFeedError):
            provider.get_entries()

        assert provider.get_entries() == FEED
