"""Session token exceptions."""


class SessionTokenException(Exception):
    """Base session token exception."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RandomSourceFailure(SessionTokenException):
    """The secure random source could not produce bytes."""
    pass


class StoreFailure(SessionTokenException):
    """A token store operation failed."""
    pass


class DuplicateIdentifier(StoreFailure):
    """A session with the same identifier already exists."""
    pass


class SessionNotFound(SessionTokenException):
    """No persisted session exists for the identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"Session not found: {identifier[:8]}...")
        self.identifier = identifier


class MalformedToken(SessionTokenException):
    """The token does not parse into an identifier and a verifier."""
    pass
