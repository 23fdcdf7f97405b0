from core.config import DEFAULT_DATABASE_URL, AppConfig


def test_defaults_from_empty_env():
    cfg = AppConfig.from_env({})
    assert cfg == AppConfig()
    assert cfg.database_url == DEFAULT_DATABASE_URL
    assert cfg.catalog_path == "Music"
    assert cfg.auth_token is None
    assert cfg.search_delay_ms == 300
    assert cfg.log_level == "INFO"


def test_env_overrides():
    cfg = AppConfig.from_env({
        "ZAIDEIH_DATABASE_URL": "https://example-rtdb.firebaseio.com/",
        "ZAIDEIH_CATALOG_PATH": "/Tracks/",
        "ZAIDEIH_AUTH_TOKEN": " tok ",
        "ZAIDEIH_REQUEST_TIMEOUT": "30",
        "ZAIDEIH_SEARCH_DELAY_MS": "150",
        "ZAIDEIH_VOLUME": "0.25",
        "ZAIDEIH_LOG_LEVEL": "debug",
    })
    assert cfg.database_url == "https://example-rtdb.firebaseio.com"
    assert cfg.catalog_path == "Tracks"
    assert cfg.auth_token == "tok"
    assert cfg.request_timeout == 30.0
    assert cfg.search_delay_ms == 150
    assert cfg.volume == 0.25
    assert cfg.log_level == "DEBUG"


def test_malformed_values_fall_back():
    cfg = AppConfig.from_env({
        "ZAIDEIH_REQUEST_TIMEOUT": "soon",
        "ZAIDEIH_SEARCH_DELAY_MS": "fast",
        "ZAIDEIH_VOLUME": "11",
        "ZAIDEIH_LOG_LEVEL": "LOUD",
    })
    assert cfg.request_timeout == 15.0
    assert cfg.search_delay_ms == 300
    assert cfg.volume == 1.0
    assert cfg.log_level == "INFO"
