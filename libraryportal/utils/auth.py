from flask import current_app, jsonify, request, session
from werkzeug.security import check_password_hash, generate_password_hash

SESSION_USER_KEY = "username"


class InMemoryUserStore:
    """Holds the configured accounts; only password hashes are kept."""

    def __init__(self):
        self._hashes = {}

    def add_user(self, username: str, password: str):
        self._hashes[username] = generate_password_hash(password)

    def authenticate(self, username: str, password: str) -> bool:
        password_hash = self._hashes.get(username or "")
        return bool(password_hash) and check_password_hash(password_hash, password or "")


def _users() -> InMemoryUserStore:
    return current_app.extensions["libraryportal"]["users"]


def authenticate(username: str, password: str) -> bool:
    return _users().authenticate(username, password)


def current_username():
    """Session user (form login) or the HTTP Basic user of this request."""
    if session.get(SESSION_USER_KEY):
        return session[SESSION_USER_KEY]

    auth = request.authorization
    if auth is not None and auth.type == "basic" and authenticate(auth.username, auth.password):
        return auth.username
    return None


def _is_public(path: str) -> bool:
    for prefix in current_app.config["PUBLIC_PATH_PREFIXES"]:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return True
    return False


def _unauthorized():
    resp = jsonify({
        "errorCode": 401,
        "errorMessage": "Full authentication is required to access this resource",
    })
    resp.status_code = 401
    resp.headers["WWW-Authenticate"] = 'Basic realm="libraryportal"'
    return resp


def require_authentication():
    """before_request hook: everything outside the public prefixes needs a user."""
    if request.method == "OPTIONS" or _is_public(request.path):
        return None
    if current_username() is None:
        current_app.logger.warning(f"[auth] Unauthenticated request rejected: {request.method} {request.path}")
        return _unauthorized()
    return None


def init_security(app):
    users = InMemoryUserStore()
    users.add_user(app.config["LIBRARY_USERNAME"], app.config["LIBRARY_PASSWORD"])
    app.extensions.setdefault("libraryportal", {})["users"] = users
    app.before_request(require_authentication)
    app.logger.info(f"[auth] In-memory user configured: {app.config['LIBRARY_USERNAME']}")
