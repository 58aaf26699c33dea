from app.core.config import Settings


def test_database_uri_override():
    settings = Settings(DATABASE_URI="sqlite:///./orders.db")

    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./orders.db"


def test_default_database_uri_is_built_from_parts():
    settings = Settings(
        DATABASE_URI=None,
        DB_USER="app",
        DB_PASSWORD="secret",
        DB_HOST="db",
        DB_PORT="3307",
        DB_NAME="orders",
    )

    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://app:secret@db:3307/orders"


def test_cors_origins_accepts_comma_separated_string():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")

    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_accepts_json_array():
    settings = Settings(CORS_ORIGINS='["http://a.test"]')

    assert settings.CORS_ORIGINS == ["http://a.test"]


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "online"
