"""Exception hierarchy shared by the client, parser and store layers."""


class MatchupNotesError(Exception):
    """Base class for all application errors."""


class ClientError(MatchupNotesError):
    """Failure talking to the local game client."""


class ClientNotRunningError(ClientError):
    """The game client process (or its lockfile) is not present."""

    def __init__(self, message: str = "League client not running"):
        super().__init__(message)


class ParseError(ClientError):
    """Credentials or an API response did not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(f"Failed to parse client info: {message}")
        self.reason = message


class RequestError(ClientError):
    """Network-level failure reaching the local client."""

    def __init__(self, message: str):
        super().__init__(f"HTTP request failed: {message}")


class ApiError(ClientError):
    """The local client answered with a non-success status."""

    BODY_EXCERPT_LIMIT = 200

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body_excerpt = body[: self.BODY_EXCERPT_LIMIT]
        super().__init__(f"API error: HTTP {status_code}: {self.body_excerpt}")


class NotFoundError(MatchupNotesError):
    """A referenced matchup or match id does not exist."""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found")


class StorageError(MatchupNotesError):
    """Base class for persistence failures."""


class StorageIOError(StorageError):
    """Reading or writing the data file failed."""


class SerializationError(StorageError):
    """The data file could not be encoded or decoded."""
