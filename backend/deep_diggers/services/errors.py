class GameError(Exception):
    """Base class for errors the HTTP layer turns into an error response."""


class SessionNotFound(GameError):
    pass


class PlayerNotFound(GameError):
    pass


class InvalidAction(GameError):
    pass


class LobbyCodeExhausted(GameError):
    pass
