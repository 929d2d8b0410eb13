import os


def _env_list(name: str, default: str):
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///libraryportal.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # create_all() at start-up; switch off once migrations own the schema
    AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "1") == "1"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Single in-memory account
    LIBRARY_USERNAME = os.getenv("LIBRARY_USERNAME", "user")
    LIBRARY_PASSWORD = os.getenv("LIBRARY_PASSWORD", "password")
    LOGIN_SUCCESS_URL = os.getenv("LOGIN_SUCCESS_URL", "/swagger-ui/index.html")

    # Prefixes reachable without credentials
    PUBLIC_PATH_PREFIXES = ("/api/books", "/api/borrowers", "/swagger-ui", "/login", "/logout")

    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "libraryportal_session")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0") == "1"

    CORS_ORIGINS = _env_list("CORS_ORIGINS", "http://localhost:8080")
    CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS = ["Authorization", "Content-Type"]
    CORS_EXPOSE_HEADERS = ["Authorization"]
    CORS_SUPPORTS_CREDENTIALS = True

    # flasgger: UI, spec and static assets all live under the public /swagger-ui prefix
    SWAGGER = {
        "openapi": "3.0.2",
        "uiversion": 3,
        "specs_route": "/swagger-ui/index.html",
        "static_url_path": "/swagger-ui/static",
        "specs": [
            {
                "endpoint": "apispec",
                "route": "/swagger-ui/api-docs.json",
                # paths come from apidocs.API_DOCS, not from view docstrings
                "rule_filter": lambda rule: False,
                "model_filter": lambda tag: True,
            }
        ],
    }


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTO_CREATE_TABLES = True
    LOG_LEVEL = "DEBUG"
