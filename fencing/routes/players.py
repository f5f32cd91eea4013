from flask import Blueprint, jsonify

from ..auth import admin_required, login_required
from ..schemas import PlayerData
from . import json_body, services

bp = Blueprint('players', __name__)


@bp.route('/players', methods=['GET'])
@login_required
def list_players():
    return jsonify([p.to_dict() for p in services().players.list_players()])


@bp.route('/players', methods=['POST'])
@admin_required
def add_player():
    player = services().players.add_player(PlayerData.from_dict(json_body()))
    return jsonify(player.to_dict()), 201


@bp.route('/players/<int:player_id>', methods=['GET'])
@login_required
def get_player(player_id: int):
    return jsonify(services().players.get_player(player_id).to_dict())


@bp.route('/players/<int:player_id>', methods=['PUT'])
@admin_required
def update_player(player_id: int):
    player = services().players.update_player(player_id, PlayerData.from_dict(json_body()))
    return jsonify(player.to_dict())


@bp.route('/players/<int:player_id>', methods=['DELETE'])
@admin_required
def delete_player(player_id: int):
    services().players.delete_player(player_id)
    return '', 204
