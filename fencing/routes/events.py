from flask import Blueprint, jsonify

from ..auth import admin_required, login_required
from ..schemas import EventData
from . import json_body, services

bp = Blueprint('events', __name__)


@bp.route('/tournaments/<int:tournament_id>/events', methods=['GET'])
@login_required
def list_events(tournament_id: int):
    events = services().events.get_all_events_by_tournament_id(tournament_id)
    return jsonify([e.to_dict() for e in events])


@bp.route('/tournaments/<int:tournament_id>/events', methods=['POST'])
@admin_required
def add_event(tournament_id: int):
    event = services().events.add_event(tournament_id, EventData.from_dict(json_body()))
    return jsonify(event.to_dict()), 201


@bp.route('/tournaments/<int:tournament_id>/events/<int:event_id>', methods=['GET'])
@login_required
def get_event(tournament_id: int, event_id: int):
    event = services().events.get_event_in_tournament(tournament_id, event_id)
    return jsonify(event.to_dict())


@bp.route('/tournaments/<int:tournament_id>/events/<int:event_id>', methods=['PUT'])
@admin_required
def update_event(tournament_id: int, event_id: int):
    event = services().events.update_event(tournament_id, event_id, EventData.from_dict(json_body()))
    return jsonify(event.to_dict())


@bp.route('/tournaments/<int:tournament_id>/events/<int:event_id>', methods=['DELETE'])
@admin_required
def delete_event(tournament_id: int, event_id: int):
    services().events.delete_event(tournament_id, event_id)
    return '', 204


# ==================== Rankings ====================

@bp.route('/tournaments/<int:tournament_id>/events/<int:event_id>/players/<int:player_id>', methods=['POST'])
@admin_required
def add_player_to_event(tournament_id: int, event_id: int, player_id: int):
    services().events.get_event_in_tournament(tournament_id, event_id)
    event = services().events.add_player_to_event(event_id, player_id)
    return jsonify(event.to_dict()), 201


@bp.route('/tournaments/<int:tournament_id>/events/<int:event_id>/rankings', methods=['GET'])
@login_required
def get_rankings(tournament_id: int, event_id: int):
    services().events.get_event_in_tournament(tournament_id, event_id)
    ranks = services().events.get_rankings(event_id)
    return jsonify([r.to_dict() for r in ranks])
