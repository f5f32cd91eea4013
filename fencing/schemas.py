"""
Request payloads for the writable entities.

Each payload is a plain dataclass parsed from a JSON body with ``from_dict``;
services build or update model rows from these rather than from raw dicts.
Output goes the other way through each model's ``to_dict``.
"""
from dataclasses import dataclass, fields
from datetime import date, datetime
from enum import Enum
from typing import Optional, Type

from .exceptions import ValidationError
from .models import Gender, WeaponType


def parse_date(value, field_name: str) -> Optional[date]:
    if value is None or value == '':
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Invalid date for '{field_name}': {value!r}")


def parse_datetime(value, field_name: str) -> Optional[datetime]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    raw = str(value).strip()
    try:
        parsed = datetime.fromisoformat(raw.replace('Z', '+00:00'))
    except ValueError:
        raise ValidationError(f"Invalid timestamp for '{field_name}': {value!r}")
    # Stored as the client's local wall-clock time; the offset is dropped so
    # the calendar date the client sent is the one compared against today
    return parsed.replace(tzinfo=None)


def parse_enum(enum_cls: Type[Enum], value, field_name: str):
    if value is None or value == '':
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        allowed = ', '.join(e.value for e in enum_cls)
        raise ValidationError(f"Invalid value for '{field_name}': {value!r} (expected one of {allowed})")


def parse_int(value, field_name: str) -> Optional[int]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid integer for '{field_name}': {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid integer for '{field_name}': {value!r}")


def _require_mapping(data) -> dict:
    if data is None:
        raise ValidationError("Request body is required")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


@dataclass
class TournamentData:
    name: Optional[str] = None
    venue: Optional[str] = None
    registration_start_date: Optional[date] = None
    registration_end_date: Optional[date] = None
    tournament_start_date: Optional[date] = None
    tournament_end_date: Optional[date] = None

    DATE_FIELDS = (
        'registration_start_date',
        'registration_end_date',
        'tournament_start_date',
        'tournament_end_date',
    )

    @classmethod
    def from_dict(cls, data: dict) -> "TournamentData":
        data = _require_mapping(data)
        values = {'name': data.get('name'), 'venue': data.get('venue')}
        for name in cls.DATE_FIELDS:
            values[name] = parse_date(data.get(name), name)
        return cls(**values)

    def provided_fields(self) -> dict:
        """Fields carrying a value, used for partial updates."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class EventData:
    tournament_id: Optional[int] = None
    gender: Optional[Gender] = None
    weapon: Optional[WeaponType] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    knockout_stage_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "EventData":
        data = _require_mapping(data)
        return cls(
            tournament_id=parse_int(data.get('tournament_id'), 'tournament_id'),
            gender=parse_enum(Gender, data.get('gender'), 'gender'),
            weapon=parse_enum(WeaponType, data.get('weapon'), 'weapon'),
            start_date=parse_datetime(data.get('start_date'), 'start_date'),
            end_date=parse_datetime(data.get('end_date'), 'end_date'),
            knockout_stage_id=parse_int(data.get('knockout_stage_id'), 'knockout_stage_id'),
        )


@dataclass
class KnockoutStageData:
    event_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "KnockoutStageData":
        # Stages carry no writable fields beyond their event; an empty body is fine
        data = data or {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return cls(event_id=parse_int(data.get('event_id'), 'event_id'))


@dataclass
class PlayerData:
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerData":
        data = _require_mapping(data)
        return cls(
            username=data.get('username'),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            email=data.get('email'),
        )


@dataclass
class Credentials:
    username: str
    password: str
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Credentials":
        data = _require_mapping(data)
        username = data.get('username')
        password = data.get('password')
        if not username or not password:
            raise ValidationError("Username and password are required")
        return cls(username=username, password=password, email=data.get('email'))
