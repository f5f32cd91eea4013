import logging
from typing import List, Optional

from ..exceptions import PlayerNotFound, ValidationError
from ..models import Player
from ..repositories import PlayerRepository
from ..schemas import PlayerData

logger = logging.getLogger(__name__)


class PlayerService:

    def __init__(self, player_repository: PlayerRepository):
        self.players = player_repository

    def list_players(self) -> List[Player]:
        return self.players.find_all()

    def get_player(self, player_id: int) -> Player:
        player = self.players.find_by_id(player_id)
        if player is None:
            raise PlayerNotFound(player_id)
        return player

    def find_by_username(self, username: str) -> Optional[Player]:
        return self.players.find_by_username(username)

    def add_player(self, data: PlayerData) -> Player:
        if data is None or not data.username:
            raise ValidationError("Player username is required")
        if self.players.find_by_username(data.username) is not None:
            raise ValidationError(f"Username '{data.username}' is already taken")

        player = Player(
            username=data.username,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
        )
        self.players.save(player)
        logger.info("Created player %s (%s)", player.id, player.username)
        return player

    def update_player(self, player_id: int, data: PlayerData) -> Player:
        if data is None or not data.username:
            raise ValidationError("Player username is required")

        player = self.get_player(player_id)
        other = self.players.find_by_username(data.username)
        if other is not None and other.id != player.id:
            raise ValidationError(f"Username '{data.username}' is already taken")

        player.username = data.username
        player.first_name = data.first_name
        player.last_name = data.last_name
        player.email = data.email
        return self.players.save(player)

    def delete_player(self, player_id: int) -> None:
        player = self.get_player(player_id)
        self.players.delete(player)
        logger.info("Deleted player %s", player_id)
