from datetime import datetime
from enum import Enum
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class WeaponType(str, Enum):
    FOIL = "FOIL"
    EPEE = "EPEE"
    SABER = "SABER"


def _iso(value):
    return value.isoformat() if value else None


class User(db.Model):
    """Account used for authentication only; holds no domain state."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    role = db.Column(db.Enum(Role), nullable=False, default=Role.USER)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'role': self.role.value if self.role else None,
            'created_at': _iso(self.created_at),
        }


class Tournament(db.Model):
    __tablename__ = 'tournaments'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    venue = db.Column(db.String(200), nullable=True)

    registration_start_date = db.Column(db.Date, nullable=True)
    registration_end_date = db.Column(db.Date, nullable=True)
    tournament_start_date = db.Column(db.Date, nullable=True)
    tournament_end_date = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    events = db.relationship('Event', back_populates='tournament', cascade='all, delete-orphan',
                             order_by='Event.id')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'venue': self.venue,
            'registration_start_date': _iso(self.registration_start_date),
            'registration_end_date': _iso(self.registration_end_date),
            'tournament_start_date': _iso(self.tournament_start_date),
            'tournament_end_date': _iso(self.tournament_end_date),
            'event_ids': [e.id for e in self.events],
        }


class Event(db.Model):
    __tablename__ = 'events'

    id = db.Column(db.Integer, primary_key=True)
    tournament_id = db.Column(db.Integer, db.ForeignKey('tournaments.id'), nullable=False, index=True)
    gender = db.Column(db.Enum(Gender), nullable=True)
    weapon = db.Column(db.Enum(WeaponType), nullable=True)
    start_date = db.Column(db.DateTime, nullable=True)
    end_date = db.Column(db.DateTime, nullable=True)

    tournament = db.relationship('Tournament', back_populates='events')
    rankings = db.relationship('PlayerRank', back_populates='event', cascade='all, delete-orphan')
    knockout_stage = db.relationship('KnockoutStage', back_populates='event', uselist=False,
                                     cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'tournament_id': self.tournament_id,
            'gender': self.gender.value if self.gender else None,
            'weapon': self.weapon.value if self.weapon else None,
            'start_date': _iso(self.start_date),
            'end_date': _iso(self.end_date),
            'knockout_stage_id': self.knockout_stage.id if self.knockout_stage else None,
            'rankings': [r.to_dict() for r in self.rankings],
        }


class KnockoutStage(db.Model):
    __tablename__ = 'knockout_stages'

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=False, unique=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    event = db.relationship('Event', back_populates='knockout_stage')

    def to_dict(self):
        return {
            'id': self.id,
            'event_id': self.event_id,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }


class Player(db.Model):
    __tablename__ = 'players'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False, index=True)
    first_name = db.Column(db.String(100), nullable=True)
    last_name = db.Column(db.String(100), nullable=True)
    email = db.Column(db.String(200), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    rankings = db.relationship('PlayerRank', back_populates='player', cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
        }


class PlayerRank(db.Model):
    __tablename__ = 'player_ranks'

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0)

    event = db.relationship('Event', back_populates='rankings')
    player = db.relationship('Player', back_populates='rankings')

    def to_dict(self):
        return {
            'id': self.id,
            'event_id': self.event_id,
            'player_id': self.player_id,
            'username': self.player.username if self.player else None,
            'score': self.score,
        }
