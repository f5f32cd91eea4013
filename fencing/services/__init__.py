from dataclasses import dataclass

from ..repositories import (
    EventRepository,
    KnockoutStageRepository,
    PlayerRankRepository,
    PlayerRepository,
    TournamentRepository,
    UserRepository,
)
from .event_service import EventService
from .knockout_stage_service import KnockoutStageService
from .player_service import PlayerService
from .tournament_service import TournamentService
from .user_service import UserService


@dataclass
class Services:
    tournaments: TournamentService
    events: EventService
    knockout_stages: KnockoutStageService
    players: PlayerService
    users: UserService


def build_services() -> Services:
    """Wire every service to its repositories. Called once per app."""
    tournament_repository = TournamentRepository()
    event_repository = EventRepository()
    knockout_stage_repository = KnockoutStageRepository()
    player_repository = PlayerRepository()
    player_rank_repository = PlayerRankRepository()
    user_repository = UserRepository()

    return Services(
        tournaments=TournamentService(tournament_repository),
        events=EventService(
            event_repository,
            tournament_repository,
            player_repository,
            knockout_stage_repository,
            player_rank_repository
        ),
        knockout_stages=KnockoutStageService(knockout_stage_repository, event_repository),
        players=PlayerService(player_repository),
        users=UserService(user_repository),
    )
