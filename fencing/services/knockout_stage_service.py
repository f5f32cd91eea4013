import logging
from datetime import datetime

from ..exceptions import EventNotFound, KnockoutStageNotFound, ValidationError
from ..models import KnockoutStage
from ..repositories import EventRepository, KnockoutStageRepository
from ..schemas import KnockoutStageData

logger = logging.getLogger(__name__)


class KnockoutStageService:
    """The elimination phase of an event. Each event has at most one."""

    def __init__(self, knockout_stage_repository: KnockoutStageRepository, event_repository: EventRepository):
        self.stages = knockout_stage_repository
        self.events = event_repository

    def add_knockout_stage(self, event_id: int, stage: KnockoutStageData = None) -> KnockoutStage:
        if event_id is None:
            raise ValidationError("Event ID cannot be null")

        event = self.events.find_by_id(event_id)
        if event is None:
            raise EventNotFound(event_id)
        if event.knockout_stage is not None:
            raise ValidationError(f"Event {event_id} already has a knockout stage")

        knockout_stage = KnockoutStage(event=event)
        self.stages.save(knockout_stage)
        logger.info("Added knockout stage %s to event %s", knockout_stage.id, event_id)
        return knockout_stage

    def get_knockout_stage(self, stage_id: int) -> KnockoutStage:
        stage = self.stages.find_by_id(stage_id)
        if stage is None:
            raise KnockoutStageNotFound(stage_id)
        return stage

    def get_knockout_stage_for_event(self, event_id: int) -> KnockoutStage:
        if not self.events.exists_by_id(event_id):
            raise EventNotFound(event_id)
        stage = self.stages.find_by_event_id(event_id)
        if stage is None:
            raise KnockoutStageNotFound(message=f"Event {event_id} has no knockout stage")
        return stage

    def get_knockout_stage_of_event(self, event_id: int, stage_id: int) -> KnockoutStage:
        stage = self.stages.find_by_event_id_and_id(event_id, stage_id)
        if stage is None:
            raise KnockoutStageNotFound(stage_id)
        return stage

    def update_knockout_stage(self, event_id: int, stage_id: int, stage: KnockoutStageData = None) -> KnockoutStage:
        existing = self.get_knockout_stage_of_event(event_id, stage_id)
        if stage is not None and stage.event_id is not None and stage.event_id != event_id:
            raise ValidationError("Event cannot be changed")
        existing.updated_at = datetime.utcnow()
        return self.stages.save(existing)

    def delete_knockout_stage(self, event_id: int, stage_id: int) -> None:
        existing = self.get_knockout_stage_of_event(event_id, stage_id)
        self.stages.delete(existing)
        logger.info("Deleted knockout stage %s of event %s", stage_id, event_id)
