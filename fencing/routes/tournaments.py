from flask import Blueprint, jsonify, request

from ..auth import admin_required, login_required
from ..schemas import TournamentData, parse_date
from . import json_body, services

bp = Blueprint('tournaments', __name__)


@bp.route('/tournaments', methods=['GET'])
@login_required
def list_tournaments():
    """List tournaments, optionally only those running on ``?date=``."""
    on = request.args.get('date')
    if on:
        tournaments = services().tournaments.find_by_date(parse_date(on, 'date'))
    else:
        tournaments = services().tournaments.list_tournaments()
    return jsonify([t.to_dict() for t in tournaments])


@bp.route('/tournaments', methods=['POST'])
@admin_required
def add_tournament():
    tournament = services().tournaments.add_tournament(TournamentData.from_dict(json_body()))
    return jsonify(tournament.to_dict()), 201


@bp.route('/tournaments/<int:tournament_id>', methods=['GET'])
@login_required
def get_tournament(tournament_id: int):
    tournament = services().tournaments.get_tournament_or_404(tournament_id)
    return jsonify(tournament.to_dict())


@bp.route('/tournaments/<int:tournament_id>', methods=['PUT', 'PATCH'])
@admin_required
def update_tournament(tournament_id: int):
    tournament = services().tournaments.update_tournament(
        tournament_id,
        TournamentData.from_dict(json_body()),
        partial=request.method == 'PATCH'
    )
    return jsonify(tournament.to_dict())


@bp.route('/tournaments/<int:tournament_id>', methods=['DELETE'])
@admin_required
def delete_tournament(tournament_id: int):
    services().tournaments.delete_tournament(tournament_id)
    return '', 204
