import pytest

from spending_store.settings import DEFAULT_RECENT_LIMIT, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SPENDING_STORE_RECENT_LIMIT", raising=False)
    monkeypatch.delenv("SPENDING_STORE_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.recent_limit == DEFAULT_RECENT_LIMIT
    assert settings.log_level == "INFO"
    assert (settings.templates_dir / "index.html").is_file()


@pytest.mark.parametrize("raw,expected", [("0", 0), ("3", 3), ("12", 12)])
def test_recent_limit_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SPENDING_STORE_RECENT_LIMIT", raw)
    assert get_settings().recent_limit == expected


@pytest.mark.parametrize("raw", ["", "abc", "2.5", "-1"])
def test_bad_recent_limit_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("SPENDING_STORE_RECENT_LIMIT", raw)
    assert get_settings().recent_limit == DEFAULT_RECENT_LIMIT


@pytest.mark.parametrize(
    "raw,expected",
    [("debug", "DEBUG"), (" warning ", "WARNING"), ("ERROR", "ERROR")],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SPENDING_STORE_LOG_LEVEL", raw)
    assert get_settings().log_level == expected


@pytest.mark.parametrize("raw", ["", "loud", "Level 5"])
def test_bad_log_level_falls_back_to_info(monkeypatch, raw):
    monkeypatch.setenv("SPENDING_STORE_LOG_LEVEL", raw)
    assert get_settings().log_level == "INFO"
