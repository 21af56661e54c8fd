"""Tests for configuration helpers."""

from exercise_tracker.config import Settings, parse_allowed_origins


def test_parse_allowed_origins_defaults_to_any() -> None:
    assert parse_allowed_origins(None) == ["*"]
    assert parse_allowed_origins(" ") == ["*"]
    assert parse_allowed_origins("*") == ["*"]


def test_parse_allowed_origins_splits_list() -> None:
    raw = "https://a.example.com, https://b.example.com,"

    assert parse_allowed_origins(raw) == [
        "https://a.example.com",
        "https://b.example.com",
    ]


def test_settings_defaults(settings: Settings) -> None:
    assert settings.port == 3000
    assert settings.log_level == "INFO"
