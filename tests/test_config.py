import pytest

from routeplanner.config import Settings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["https://a.example","https://b.example"]', ("https://a.example", "https://b.example")),
        ("https://a.example, https://b.example", ("https://a.example", "https://b.example")),
        ("https://a.example", ("https://a.example",)),
        ("", ()),
    ],
)
def test_allowed_origins_parsing(raw, expected):
    config = Settings(_env_file=None, frontend_allowed_origins=raw)

    assert config.frontend_allowed_origins == expected


def test_allowed_origins_from_environment(monkeypatch):
    monkeypatch.setenv("ROUTEPLANNER_FRONTEND_ALLOWED_ORIGINS", '["https://ops.example"]')

    assert Settings(_env_file=None).frontend_allowed_origins == ("https://ops.example",)


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_google_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ROUTEPLANNER_GOOGLE_MAPS_API_KEY", "secret")
    monkeypatch.setenv("ROUTEPLANNER_DESTINATION_METRIC", "haversine")

    config = Settings(_env_file=None)

    assert config.google_maps_api_key == "secret"
    assert config.destination_metric == "haversine"
    assert config.google_maps_timeout_seconds == 10.0
