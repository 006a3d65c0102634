from recipe_search.config import get_settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EDAMAM_APP_ID", "id-123")
    monkeypatch.setenv("EDAMAM_APP_KEY", "key-456")
    monkeypatch.setenv("EDAMAM_REQUEST_TIMEOUT", "2.5")

    settings = get_settings()
    assert settings.edamam_app_id == "id-123"
    assert settings.has_credentials
    assert settings.request_timeout == 2.5


def test_settings_defaults(monkeypatch):
    for name in ("EDAMAM_APP_ID", "EDAMAM_APP_KEY", "EDAMAM_BASE_URL", "EDAMAM_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert not settings.has_credentials
    assert settings.edamam_base_url == "https://api.edamam.com/api/recipes/v2"
    assert settings.request_timeout == 10.0


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("EDAMAM_REQUEST_TIMEOUT", "soon")
    assert get_settings().request_timeout == 10.0
