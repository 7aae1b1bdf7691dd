"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from core.config import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings defaults and validation."""

    def test_room_defaults(self, monkeypatch) -> None:
        for name in ("VOTE_WINDOW_MINUTES", "FAIRNESS_LOOKBACK", "FAIRNESS_UNSEEN_DISTANCE", "COVERAGE_LOOKBACK"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.VOTE_WINDOW_MINUTES == 30
        assert config.FAIRNESS_LOOKBACK == 20
        assert config.FAIRNESS_UNSEEN_DISTANCE == 100
        assert config.COVERAGE_LOOKBACK == 10
        assert config.STATS_HISTORY_LIMIT == 100

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("FAIRNESS_UNSEEN_DISTANCE", "250")
        assert Settings(_env_file=None).FAIRNESS_UNSEEN_DISTANCE == 250

    def test_rejects_non_positive_values(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FAIRNESS_LOOKBACK=0)

    def test_cors_origins_list(self) -> None:
        config = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_cors_origins_json(self) -> None:
        config = Settings(_env_file=None, CORS_ORIGINS='["http://a.test"]')
        assert config.cors_origins_list == ["http://a.test"]
