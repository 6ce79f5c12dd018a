from jose import jwt

from app.api.auth import ensure_default_admin
from app.core.config import get_secret_key
from app.core.security import ALGORITHM, create_token, hash_password, verify_password
from app.models.admin import Admin


def test_password_hashing():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret", None)


def test_login_and_me(client):
    resp = client.post("/api/auth/admin/login", json={"email": "Admin@Gmail.com ", "password": "admin123"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["email"] == "admin@gmail.com"
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "admin@gmail.com"


def test_login_wrong_password(client):
    resp = client.post("/api/auth/admin/login", json={"email": "admin@gmail.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_email(client):
    resp = client.post("/api/auth/admin/login", json={"email": "who@example.com", "password": "admin123"})
    assert resp.status_code == 401


def test_me_rejects_service_key_and_garbage(client, service_headers):
    assert client.get("/api/auth/me", headers=service_headers).status_code == 401
    assert client.get("/api/auth/me").status_code == 401


def test_expired_token_rejected(client):
    token = create_token({"sub": "1", "type": "admin"}, expires_minutes=-1)
    resp = client.get("/manage-properties", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid or expired token"}


def test_token_of_other_type_rejected(client):
    token = create_token({"sub": "1", "type": "partner"})
    assert client.get("/manage-properties", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_service_key_disabled_when_unset(client, monkeypatch, service_headers):
    monkeypatch.setenv("SERVICE_ROLE_KEY", "")
    assert client.get("/manage-properties", headers=service_headers).status_code == 401


def test_service_key_read_per_request(client, monkeypatch):
    monkeypatch.setenv("SERVICE_ROLE_KEY", "rotated-key")
    resp = client.get("/manage-properties", headers={"Authorization": "Bearer rotated-key"})
    assert resp.status_code == 200


def test_login_page_prefills_demo_pair(client, monkeypatch):
    monkeypatch.setenv("DEMO_MODE", "1")
    resp = client.get("/admin/login")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    page = resp.text
    assert 'value="admin@gmail.com"' in page
    assert 'value="admin123"' in page
    assert '"/api/auth/admin/login"' in page
    assert "Invalid credentials. Please use admin@gmail.com and admin123" in page
    assert "demo_admin_session" not in page


def test_login_page_escapes_configured_values(client, monkeypatch):
    monkeypatch.setenv("DEMO_MODE", "1")
    monkeypatch.setenv("ADMIN_PASSWORD", '"><script>x</script>')
    page = client.get("/admin/login").text
    assert "<script>x</script>" not in page


def test_dashboard_page(client):
    resp = client.get("/admin")
    assert resp.status_code == 200
    assert '"/admin/login"' in resp.text
    assert resp.headers["x-robots-tag"] == "noindex, nofollow"


def test_login_page_hides_credentials_outside_demo_mode(client, monkeypatch):
    monkeypatch.delenv("DEMO_MODE", raising=False)
    page = client.get("/admin/login").text
    assert "admin123" not in page
    assert 'value="admin@gmail.com"' not in page
    assert '<div class="demo">' not in page
    assert '"Invalid credentials."' in page


def test_no_admin_seeded_without_credentials(db, monkeypatch):
    for name in ("ADMIN_EMAIL", "ADMIN_PASSWORD", "DEMO_MODE"):
        monkeypatch.delenv(name, raising=False)
    assert ensure_default_admin(db) is None
    assert db.query(Admin).count() == 0


def test_demo_mode_seeds_demo_admin(db, monkeypatch):
    for name in ("ADMIN_EMAIL", "ADMIN_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEMO_MODE", "true")
    admin = ensure_default_admin(db)
    assert admin.email == "admin@gmail.com"
    assert verify_password("admin123", admin.password_hash)


def test_configured_admin_seeded_once(db):
    assert ensure_default_admin(db).email == "admin@gmail.com"
    assert ensure_default_admin(db) is None
    assert db.query(Admin).count() == 1


def test_placeholder_secret_key_is_not_used(monkeypatch):
    monkeypatch.delenv("DEMO_MODE", raising=False)
    monkeypatch.setenv("SECRET_KEY", "change-me")
    assert get_secret_key() is None
    monkeypatch.setenv("SECRET_KEY", "")
    assert get_secret_key() is None


def test_login_refused_without_secret_key(client, monkeypatch):
    monkeypatch.delenv("DEMO_MODE", raising=False)
    monkeypatch.delenv("SECRET_KEY", raising=False)
    resp = client.post("/api/auth/admin/login", json={"email": "admin@gmail.com", "password": "admin123"})
    assert resp.status_code == 503
    assert resp.json() == {"error": "Admin login is not configured"}


def test_token_signed_with_placeholder_key_rejected(client, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "change-me")
    monkeypatch.delenv("DEMO_MODE", raising=False)
    forged = jwt.encode({"sub": "1", "type": "admin"}, "change-me", algorithm=ALGORITHM)
    headers = {"Authorization": f"Bearer {forged}"}
    assert client.get("/manage-properties", headers=headers).status_code == 401
    assert client.get("/api/auth/me", headers=headers).status_code == 401
