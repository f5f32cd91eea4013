import logging
from datetime import date
from typing import List, Optional

from ..exceptions import TournamentNotFound, ValidationError
from ..models import Tournament
from ..repositories import TournamentRepository
from ..schemas import TournamentData

logger = logging.getLogger(__name__)


def validate_windows(tournament: Tournament) -> None:
    """
    Check the registration and play windows of a tournament.

    Each window must start no later than it ends, and registration must close
    no later than the tournament starts. Missing dates are not checked.
    """
    reg_start = tournament.registration_start_date
    reg_end = tournament.registration_end_date
    start = tournament.tournament_start_date
    end = tournament.tournament_end_date

    if reg_start and reg_end and reg_start > reg_end:
        raise ValidationError("Registration start date must not be after registration end date")
    if start and end and start > end:
        raise ValidationError("Tournament start date must not be after tournament end date")
    if reg_end and start and reg_end > start:
        raise ValidationError("Registration must close before the tournament starts")


class TournamentService:
    """Tournament CRUD. Authorization is enforced by the routes."""

    def __init__(self, tournament_repository: TournamentRepository):
        self.tournaments = tournament_repository

    def list_tournaments(self) -> List[Tournament]:
        return self.tournaments.find_all()

    def get_tournament(self, tournament_id: int) -> Optional[Tournament]:
        return self.tournaments.find_by_id(tournament_id)

    def get_tournament_or_404(self, tournament_id: int) -> Tournament:
        tournament = self.get_tournament(tournament_id)
        if tournament is None:
            raise TournamentNotFound(tournament_id)
        return tournament

    def does_tournament_exist(self, tournament_id: int) -> bool:
        return self.tournaments.exists_by_id(tournament_id)

    def add_tournament(self, data: TournamentData) -> Tournament:
        if data is None:
            raise ValidationError("Tournament cannot be null")
        if not data.name:
            raise ValidationError("Tournament name is required")

        tournament = Tournament(
            name=data.name,
            venue=data.venue,
            registration_start_date=data.registration_start_date,
            registration_end_date=data.registration_end_date,
            tournament_start_date=data.tournament_start_date,
            tournament_end_date=data.tournament_end_date,
        )
        validate_windows(tournament)

        self.tournaments.save(tournament)
        logger.info("Created tournament %s (%s)", tournament.id, tournament.name)
        return tournament

    def update_tournament(self, tournament_id: int, data: TournamentData, partial: bool = False) -> Tournament:
        """Overwrite a tournament's fields; with ``partial`` only the supplied ones."""
        if tournament_id is None or data is None:
            raise ValidationError("Tournament ID and updated Tournament cannot be null")

        tournament = self.get_tournament_or_404(tournament_id)

        if partial:
            changes = data.provided_fields()
        else:
            if not data.name:
                raise ValidationError("Tournament name is required")
            changes = {
                'name': data.name,
                'venue': data.venue,
                'registration_start_date': data.registration_start_date,
                'registration_end_date': data.registration_end_date,
                'tournament_start_date': data.tournament_start_date,
                'tournament_end_date': data.tournament_end_date,
            }

        # Check the merged result before touching the tracked row
        candidate = Tournament(**{
            name: changes.get(name, getattr(tournament, name))
            for name in TournamentData.DATE_FIELDS
        })
        validate_windows(candidate)

        for name, value in changes.items():
            setattr(tournament, name, value)

        return self.tournaments.save(tournament)

    def delete_tournament(self, tournament_id: int) -> None:
        """Delete a tournament and its events; a missing id is a no-op."""
        if self.tournaments.delete_by_id(tournament_id):
            logger.info("Deleted tournament %s", tournament_id)

    def find_by_date(self, on: date) -> List[Tournament]:
        if on is None:
            raise ValidationError("Date cannot be null")
        return self.tournaments.find_by_date(on)
