from app.core.config import Settings


def test_cors_origins_from_comma_separated_string(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings(_env_file=None).CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_from_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test"]')
    assert Settings(_env_file=None).CORS_ORIGINS == ["http://a.test"]


def test_cors_allow_all(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ALL", "1")
    assert Settings(_env_file=None).CORS_ORIGINS == ["*"]


def test_maps_key_falls_back_to_frontend_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    monkeypatch.setenv("NEXT_PUBLIC_GOOGLE_MAPS_API_KEY", " front-key ")
    assert Settings(_env_file=None).maps_api_key == "front-key"


def test_console_defaults():
    settings = Settings(_env_file=None)
    assert settings.CALENDAR_CELL_LIMIT == 2
    assert settings.API_V1_STR == "/api/v1"
