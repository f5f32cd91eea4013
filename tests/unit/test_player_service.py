"""
Unit tests for PlayerService.
"""
import pytest

from fencing.exceptions import PlayerNotFound, ValidationError
from fencing.models import Player, PlayerRank
from fencing.schemas import PlayerData


class TestPlayerCrud:

    def test_add_and_get(self, services):
        player = services.players.add_player(PlayerData(username='athos', first_name='Olivier', email='athos@example.com'))

        found = services.players.get_player(player.id)

        assert found.username == 'athos'
        assert found.first_name == 'Olivier'
        assert found.email == 'athos@example.com'

    def test_username_required(self, services):
        with pytest.raises(ValidationError):
            services.players.add_player(PlayerData())

    def test_duplicate_username(self, services, sample_player):
        with pytest.raises(ValidationError):
            services.players.add_player(PlayerData(username=sample_player.username))

    def test_list_players(self, services):
        for name in ('athos', 'porthos', 'aramis'):
            services.players.add_player(PlayerData(username=name))

        assert [p.username for p in services.players.list_players()] == ['athos', 'porthos', 'aramis']

    def test_find_by_username(self, services, sample_player):
        assert services.players.find_by_username('d_artagnan') is sample_player
        assert services.players.find_by_username('rochefort') is None

    def test_update(self, services, sample_player):
        updated = services.players.update_player(sample_player.id, PlayerData(username='dartagnan', last_name='Gascon'))

        assert updated.username == 'dartagnan'
        assert updated.last_name == 'Gascon'
        assert updated.first_name is None

    def test_update_keeps_own_username(self, services, sample_player):
        updated = services.players.update_player(sample_player.id, PlayerData(username=sample_player.username))

        assert updated.id == sample_player.id

    def test_update_taken_username(self, services, sample_player):
        services.players.add_player(PlayerData(username='athos'))

        with pytest.raises(ValidationError):
            services.players.update_player(sample_player.id, PlayerData(username='athos'))

    def test_delete_cascades_rankings(self, services, sample_player, sample_event):
        services.events.add_player_to_event(sample_event.id, sample_player.id)

        services.players.delete_player(sample_player.id)

        assert Player.query.count() == 0
        assert PlayerRank.query.count() == 0

    @pytest.mark.parametrize('operation', ['get', 'update', 'delete'])
    def test_unknown_id(self, services, operation):
        """get, update and delete raise PlayerNotFound for unknown ids."""
        with pytest.raises(PlayerNotFound):
            if operation == 'get':
                services.players.get_player(999)
            elif operation == 'update':
                services.players.update_player(999, PlayerData(username='ghost'))
            else:
                services.players.delete_player(999)
