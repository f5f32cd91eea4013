from flask import current_app, request


def services():
    return current_app.services


def json_body():
    """Request JSON, or None when the body is missing or not JSON."""
    return request.get_json(silent=True)
