"""
Pytest configuration for unit tests.

Provides fixtures that apply to all unit tests.
"""

import pytest

from news_trends_text.config import reset_config


SAMPLE_BULLETIN = (
    '♧ 2.3 月 News & Trends ♧\n'
    '"Stay bullish"\n'
    '\n'
    'Ⅰ. Markets\n'
    '1. Stocks rose\n'
    'ㆍ KOSPI closed higher\n'
    '📍 Record high close\n'
    '2. Bonds\n'
    '- Yields flat\n'
    'Ⅱ. Policy\n'
    '▶ Sizzling Watchlist\n'
    '• 금리 동결\n'
    '• 수출 급등\n'
    '\n'
    '♧ 2.10 火 News & Trends ♧\n'
    '"Patience pays"\n'
    'Ⅰ. Global\n'
    'ㆍ 달러 약세\n'
    'ㆍ 유가 급락\n'
)


@pytest.fixture(autouse=True, scope="function")
def fresh_config(monkeypatch):
    """
    Isolate every test from cached configuration and stray settings.

    Settings are read from the environment, so variables a developer has
    exported must not leak into test expectations.
    """
    for name in ('CAPTION_PAIRING', 'MARKERS_FILE', 'SHARE_BASE_URL', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)

    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_bulletin() -> str:
    """Two-week bulletin exercising every marker kind."""
    return SAMPLE_BULLETIN
