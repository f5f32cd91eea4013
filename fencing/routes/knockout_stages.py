from flask import Blueprint, jsonify

from ..auth import admin_required, login_required, require_admin
from ..schemas import KnockoutStageData
from . import json_body, services

bp = Blueprint('knockout_stages', __name__)

STAGE_PATH = '/tournaments/<int:tournament_id>/events/<int:event_id>/knockoutStage'


def _find_stage(tournament_id: int, event_id: int, stage_id=None):
    """Routes without a stage id act on the event's only stage."""
    services().events.get_event_in_tournament(tournament_id, event_id)
    if stage_id is None:
        return services().knockout_stages.get_knockout_stage_for_event(event_id)
    return services().knockout_stages.get_knockout_stage_of_event(event_id, stage_id)


@bp.route(STAGE_PATH, methods=['POST'])
@admin_required
def add_knockout_stage(tournament_id: int, event_id: int):
    services().events.get_event_in_tournament(tournament_id, event_id)
    stage = services().knockout_stages.add_knockout_stage(event_id, KnockoutStageData.from_dict(json_body()))
    return jsonify(stage.to_dict()), 201


@bp.route(STAGE_PATH, methods=['GET'])
@bp.route(STAGE_PATH + '/<int:stage_id>', methods=['GET'])
@login_required
def get_knockout_stage(tournament_id: int, event_id: int, stage_id: int = None):
    stage = _find_stage(tournament_id, event_id, stage_id)
    return jsonify(stage.to_dict())


# Update and delete look the stage up before checking the role: a missing
# stage is a 404 for every caller.

@bp.route(STAGE_PATH, methods=['PUT'])
@bp.route(STAGE_PATH + '/<int:stage_id>', methods=['PUT'])
@login_required
def update_knockout_stage(tournament_id: int, event_id: int, stage_id: int = None):
    stage = _find_stage(tournament_id, event_id, stage_id)
    require_admin()
    stage = services().knockout_stages.update_knockout_stage(
        event_id, stage.id, KnockoutStageData.from_dict(json_body())
    )
    return jsonify(stage.to_dict())


@bp.route(STAGE_PATH, methods=['DELETE'])
@bp.route(STAGE_PATH + '/<int:stage_id>', methods=['DELETE'])
@login_required
def delete_knockout_stage(tournament_id: int, event_id: int, stage_id: int = None):
    stage = _find_stage(tournament_id, event_id, stage_id)
    require_admin()
    services().knockout_stages.delete_knockout_stage(event_id, stage.id)
    return '', 204
