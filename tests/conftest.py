"""
Pytest configuration and fixtures for the fencing API tests.
"""
import os
import sys
from datetime import date, datetime, timedelta
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from fencing.app import create_app
from fencing.auth import issue_token
from fencing.models import db, Gender, Role, WeaponType
from fencing.schemas import EventData, PlayerData, TournamentData


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')
    
    yield app
    
    with app.app_context():
        db.drop_all()


@pytest.fixture(autouse=True)
def clean_database(app):
    """Clear all tables before each test."""
    with app.app_context():
        db.session.remove()
        
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
    yield


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def services(app):
    """Services inside an application context, for unit tests."""
    with app.app_context():
        yield app.services
        db.session.rollback()


def future(days: int) -> datetime:
    return datetime.now().replace(microsecond=0) + timedelta(days=days)


def tournament_data(**overrides) -> TournamentData:
    today = date.today()
    values = dict(
        name='Spring Championship',
        venue='Olympic Stadium',
        registration_start_date=today + timedelta(days=1),
        registration_end_date=today + timedelta(days=10),
        tournament_start_date=today + timedelta(days=15),
        tournament_end_date=today + timedelta(days=20),
    )
    values.update(overrides)
    return TournamentData(**values)


def event_data(**overrides) -> EventData:
    values = dict(
        gender=Gender.MALE,
        weapon=WeaponType.FOIL,
        start_date=future(16),
        end_date=future(17),
    )
    values.update(overrides)
    return EventData(**values)


# ==================== Unit test fixtures ====================

@pytest.fixture
def sample_tournament(services):
    return services.tournaments.add_tournament(tournament_data())


@pytest.fixture
def sample_event(services, sample_tournament):
    return services.events.add_event(sample_tournament.id, event_data())


@pytest.fixture
def sample_player(services):
    return services.players.add_player(PlayerData(username='d_artagnan', first_name='Charles', last_name='de Batz'))


# ==================== HTTP test fixtures ====================

def _token_for(app, username: str, password: str, role: Role) -> str:
    with app.app_context():
        user = app.services.users.register_user(username, password, f'{username}@example.com', role=role)
        return issue_token(user)


@pytest.fixture
def admin_token(app):
    return _token_for(app, 'admin', 'adminPass', Role.ADMIN)


@pytest.fixture
def user_token(app):
    return _token_for(app, 'user', 'userPass', Role.USER)


@pytest.fixture
def admin_headers(admin_token):
    return {'Authorization': f'Bearer {admin_token}'}


@pytest.fixture
def user_headers(user_token):
    return {'Authorization': f'Bearer {user_token}'}


@pytest.fixture
def tournament_id(app):
    with app.app_context():
        return app.services.tournaments.add_tournament(tournament_data()).id


@pytest.fixture
def event_id(app, tournament_id):
    with app.app_context():
        return app.services.events.add_event(tournament_id, event_data()).id


@pytest.fixture
def player_id(app):
    with app.app_context():
        return app.services.players.add_player(PlayerData(username='athos')).id


# ==================== Payload factories ====================

@pytest.fixture
def make_tournament_data():
    return tournament_data


@pytest.fixture
def make_event_data():
    return event_data


@pytest.fixture
def days_ahead():
    return future
