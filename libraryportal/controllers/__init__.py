from flask import current_app, jsonify, request


def get_service(name: str):
    return current_app.extensions["libraryportal"][name]


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(exc, status_table, suffix: str = ""):
    status = status_table[exc.kind]
    return jsonify({"errorCode": status, "errorMessage": exc.message + suffix}), status
