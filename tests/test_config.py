from app.core.config import get_admin_credentials, get_database_url, get_login_prefill, is_demo_mode
from app.db.session import engine


def test_database_url_fixed_at_engine_creation(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./elsewhere.db")
    assert get_database_url() == "sqlite:///./elsewhere.db"
    # the engine keeps the URL it was built with until restart
    assert str(engine.url) == "sqlite://"


def test_demo_mode_flag(monkeypatch):
    monkeypatch.delenv("DEMO_MODE", raising=False)
    assert not is_demo_mode()
    for value in ("1", "true", "Yes", " on "):
        monkeypatch.setenv("DEMO_MODE", value)
        assert is_demo_mode()
    monkeypatch.setenv("DEMO_MODE", "false")
    assert not is_demo_mode()


def test_prefill_only_in_demo_mode(monkeypatch):
    monkeypatch.delenv("DEMO_MODE", raising=False)
    assert get_admin_credentials() == ("admin@gmail.com", "admin123")
    assert get_login_prefill() is None
    monkeypatch.setenv("DEMO_MODE", "1")
    assert get_login_prefill() == ("admin@gmail.com", "admin123")
