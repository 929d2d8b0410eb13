from flask import Blueprint, current_app, jsonify, redirect, render_template, request, session, url_for

from libraryportal.utils.auth import SESSION_USER_KEY, authenticate

auth_bp = Blueprint("auth", __name__)


@auth_bp.get("/login")
def login_page():
    return render_template("login.html", error=request.args.get("error") is not None)


@auth_bp.post("/login")
def login():
    """
    Form login. Success stores the user in the session and redirects to
    LOGIN_SUCCESS_URL; failure goes back to the form with ?error.
    """
    username = (request.form.get("username") or "").strip()
    password = request.form.get("password") or ""

    if not authenticate(username, password):
        current_app.logger.warning(f"[auth] Failed login for user: {username!r}")
        return redirect(url_for("auth.login_page", error=1))

    session.clear()
    session[SESSION_USER_KEY] = username
    current_app.logger.info(f"[auth] User logged in: {username}")
    return redirect(current_app.config["LOGIN_SUCCESS_URL"])


@auth_bp.route("/logout", methods=["GET", "POST"])
def logout():
    session.clear()
    return jsonify({"success": True, "message": "Logged out"})
