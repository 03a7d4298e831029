"""
Test Suite

Structure:
- tests/unit/: Component tests with mocked HTTP responses
- tests/integration/: Live requests against Binance (opt-in, BINANCE_LIVE_TESTS=1)

Uses pytest with pytest-asyncio for testing async functionality.
"""
