"""SQLAlchemy repositories for the fencing entities."""
from datetime import date
from typing import List, Optional

from .models import db, Tournament, Event, KnockoutStage, Player, PlayerRank, User


class BaseRepository:
    """Generic CRUD over a single model, committed through the shared session."""

    model = None

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def find_all(self) -> List:
        return self.model.query.order_by(self.model.id).all()

    def find_by_id(self, entity_id) -> Optional[object]:
        if entity_id is None:
            return None
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id) -> bool:
        return self.find_by_id(entity_id) is not None

    def save(self, entity):
        self.session.add(entity)
        self.session.commit()
        return entity

    def delete(self, entity) -> None:
        self.session.delete(entity)
        self.session.commit()

    def delete_by_id(self, entity_id) -> bool:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True


class TournamentRepository(BaseRepository):
    model = Tournament

    def find_by_date(self, on: date) -> List[Tournament]:
        """Tournaments whose play window contains the given day."""
        return Tournament.query.filter(
            Tournament.tournament_start_date <= on,
            Tournament.tournament_end_date >= on,
        ).order_by(Tournament.tournament_start_date, Tournament.id).all()


class EventRepository(BaseRepository):
    model = Event

    def find_by_tournament_id(self, tournament_id: int) -> List[Event]:
        return Event.query.filter_by(tournament_id=tournament_id).order_by(Event.id).all()

    def delete_by_tournament_id_and_id(self, tournament_id: int, event_id: int) -> int:
        # Row-by-row so the ORM cascades to rankings and the knockout stage
        events = Event.query.filter_by(tournament_id=tournament_id, id=event_id).all()
        for event in events:
            self.session.delete(event)
        self.session.commit()
        return len(events)


class KnockoutStageRepository(BaseRepository):
    model = KnockoutStage

    def find_by_event_id_and_id(self, event_id: int, stage_id: int) -> Optional[KnockoutStage]:
        return KnockoutStage.query.filter_by(event_id=event_id, id=stage_id).first()

    def find_by_event_id(self, event_id: int) -> Optional[KnockoutStage]:
        return KnockoutStage.query.filter_by(event_id=event_id).first()


class PlayerRepository(BaseRepository):
    model = Player

    def find_by_username(self, username: str) -> Optional[Player]:
        return Player.query.filter_by(username=username).first()


class PlayerRankRepository(BaseRepository):
    model = PlayerRank

    def find_by_event_id(self, event_id: int) -> List[PlayerRank]:
        return PlayerRank.query.filter_by(event_id=event_id).order_by(
            PlayerRank.score.desc(), PlayerRank.id
        ).all()


class UserRepository(BaseRepository):
    model = User

    def find_by_username(self, username: str) -> Optional[User]:
        return User.query.filter_by(username=username).first()
