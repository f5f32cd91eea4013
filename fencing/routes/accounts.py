from flask import Blueprint, jsonify
from flask_login import current_user

from ..auth import issue_token, login_required
from ..schemas import Credentials
from . import json_body, services

bp = Blueprint('accounts', __name__, url_prefix='/auth')


@bp.route('/register', methods=['POST'])
def register():
    """Create a regular (USER) account. Administrators are seeded by manage_db.py."""
    credentials = Credentials.from_dict(json_body())
    user = services().users.register_user(credentials.username, credentials.password, credentials.email)
    return jsonify(user.to_dict()), 201


@bp.route('/login', methods=['POST'])
def login():
    credentials = Credentials.from_dict(json_body())
    user = services().users.authenticate(credentials.username, credentials.password)
    return jsonify({
        'token': issue_token(user),
        'token_type': 'Bearer',
        'user': user.to_dict()
    })


@bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify(current_user.to_dict())
