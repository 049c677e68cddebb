import pytest

from tweet_categorizer.config.config import Config


def test_validate_requires_api_key(monkeypatch):
    monkeypatch.setattr(Config, 'GEMINI_API_KEY', None)
    with pytest.raises(ValueError, match='GEMINI_API_KEY'):
        Config.validate()


def test_validate_rejects_zero_rate(monkeypatch):
    monkeypatch.setattr(Config, 'GEMINI_API_KEY', 'test-key')
    monkeypatch.setattr(Config, 'CLASSIFIER_REQUESTS_PER_MINUTE', 0)
    with pytest.raises(ValueError):
        Config.validate()


def test_validate_summary(monkeypatch):
    monkeypatch.setattr(Config, 'GEMINI_API_KEY', 'test-key')
    monkeypatch.setattr(Config, 'CLASSIFIER_REQUESTS_PER_MINUTE', 10)

    summary = Config.validate()

    assert summary['classifier']['requests_per_minute'] == 10
    assert 'gemini_model' in summary
