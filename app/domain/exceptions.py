class InvalidArgumentError(ValueError):
    """Raised before any mutation when a required identity argument is missing or empty."""


class PlaylistNotFoundError(LookupError):
    """Raised when a playlist id is not known to the repository."""
