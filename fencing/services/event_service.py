import logging
from datetime import date
from typing import Callable, List, Optional

from ..exceptions import EventNotFound, KnockoutStageNotFound, PlayerNotFound, TournamentNotFound, ValidationError
from ..models import Event, PlayerRank
from ..repositories import (
    EventRepository,
    KnockoutStageRepository,
    PlayerRankRepository,
    PlayerRepository,
    TournamentRepository,
)
from ..schemas import EventData

logger = logging.getLogger(__name__)


class EventService:
    """
    Events within a tournament and the players ranked in them.

    An event's tournament is fixed at creation. Updates overwrite the event's
    schedule, category and knockout stage reference; rankings are only
    changed through ``add_player_to_event``.
    """

    def __init__(
        self,
        event_repository: EventRepository,
        tournament_repository: TournamentRepository,
        player_repository: PlayerRepository,
        knockout_stage_repository: KnockoutStageRepository,
        player_rank_repository: PlayerRankRepository,
        today: Callable[[], date] = None
    ):
        self.events = event_repository
        self.tournaments = tournament_repository
        self.players = player_repository
        self.stages = knockout_stage_repository
        self.ranks = player_rank_repository
        self._today = today or date.today

    def add_event(self, tournament_id: int, event: EventData) -> Event:
        if tournament_id is None or event is None:
            raise ValidationError("Tournament ID and Event cannot be null")

        tournament = self.tournaments.find_by_id(tournament_id)
        if tournament is None:
            raise TournamentNotFound(tournament_id)

        new_event = Event(
            gender=event.gender,
            weapon=event.weapon,
            start_date=event.start_date,
            end_date=event.end_date,
        )
        new_event.tournament = tournament

        self.events.save(new_event)
        logger.info("Added event %s to tournament %s", new_event.id, tournament_id)
        return new_event

    def get_all_events_by_tournament_id(self, tournament_id: int) -> List[Event]:
        if tournament_id is None:
            raise ValidationError("Tournament ID cannot be null")
        if not self.tournaments.exists_by_id(tournament_id):
            raise TournamentNotFound(tournament_id)
        return self.events.find_by_tournament_id(tournament_id)

    def get_event(self, event_id: int) -> Event:
        if event_id is None:
            raise ValidationError("Event ID cannot be null")
        event = self.events.find_by_id(event_id)
        if event is None:
            raise EventNotFound(event_id)
        return event

    def get_event_in_tournament(self, tournament_id: int, event_id: int) -> Event:
        """Like get_event, but an event of another tournament is not found either."""
        event = self.get_event(event_id)
        if event.tournament_id != tournament_id:
            raise EventNotFound(message=f"Event {event_id} does not belong to tournament {tournament_id}")
        return event

    def update_event(self, tournament_id: int, event_id: int, new_event: EventData) -> Event:
        if tournament_id is None or event_id is None or new_event is None:
            raise ValidationError("Tournament ID, Event ID and updated Event cannot be null")

        existing = self.get_event(event_id)

        new_tournament_id = new_event.tournament_id if new_event.tournament_id is not None else tournament_id
        if existing.tournament_id != new_tournament_id:
            logger.warning("Rejected update of event %s: tournament %s -> %s",
                           event_id, existing.tournament_id, new_tournament_id)
            raise ValidationError("Tournament cannot be changed")

        if new_event.start_date is None or not self._today() < new_event.start_date.date():
            logger.warning("Rejected update of event %s: start date %s is not in the future",
                           event_id, new_event.start_date)
            raise ValidationError("Event start date must be after the current date")

        existing.gender = new_event.gender
        existing.weapon = new_event.weapon
        existing.start_date = new_event.start_date
        existing.end_date = new_event.end_date
        existing.knockout_stage = self._resolve_knockout_stage(existing, new_event.knockout_stage_id)

        return self.events.save(existing)

    def _resolve_knockout_stage(self, event: Event, stage_id: Optional[int]):
        if stage_id is None:
            return None
        stage = self.stages.find_by_id(stage_id)
        if stage is None:
            raise KnockoutStageNotFound(stage_id)
        if stage.event_id != event.id:
            raise ValidationError(f"Knockout stage {stage_id} belongs to another event")
        return stage

    def add_player_to_event(self, event_id: int, player_id: int) -> Event:
        if event_id is None or player_id is None:
            raise ValidationError("Event ID and Player ID cannot be null")

        event = self.get_event(event_id)
        player = self.players.find_by_id(player_id)
        if player is None:
            raise PlayerNotFound(player_id)

        rank = PlayerRank(player=player, score=0)
        event.rankings.append(rank)

        self.events.save(event)
        logger.info("Added player %s to event %s", player_id, event_id)
        return event

    def get_rankings(self, event_id: int) -> List[PlayerRank]:
        self.get_event(event_id)
        return self.ranks.find_by_event_id(event_id)

    def delete_event(self, tournament_id: int, event_id: int) -> None:
        """Delete an event of a tournament; nothing happens when no such pair exists."""
        if tournament_id is None or event_id is None:
            raise ValidationError("Tournament ID and Event ID cannot be null")
        deleted = self.events.delete_by_tournament_id_and_id(tournament_id, event_id)
        if deleted:
            logger.info("Deleted event %s of tournament %s", event_id, tournament_id)
