class FencingError(Exception):
    status_code = 500

    def __init__(self, message: str = None):
        self.message = message or "Internal server error"
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'error': self.message}


class NotFoundError(FencingError):
    status_code = 404
    entity = "Entity"

    def __init__(self, entity_id=None, message: str = None):
        self.entity_id = entity_id
        super().__init__(message or f"Could not find {self.entity.lower()} {entity_id}")


class TournamentNotFound(NotFoundError):
    entity = "Tournament"


class EventNotFound(NotFoundError):
    entity = "Event"


class PlayerNotFound(NotFoundError):
    entity = "Player"


class KnockoutStageNotFound(NotFoundError):
    entity = "Knockout stage"


class ValidationError(FencingError):
    status_code = 400


class AuthenticationError(FencingError):
    status_code = 401

    def __init__(self, message: str = None):
        super().__init__(message or "Authentication required")


class AuthorizationError(FencingError):
    status_code = 403

    def __init__(self, message: str = None):
        super().__init__(message or "Insufficient permissions")
