"""Domain exceptions: all public errors of rosterfilter.

Engine mutations never raise for well-formed input. These cover
construction-time integrity and decoding of external data.
"""


class RosterFilterError(Exception):
    """Base for all rosterfilter error exceptions.

    Allows: except RosterFilterError to catch all library errors.
    """


class RosterIntegrityError(RosterFilterError, ValueError):
    """Roster snapshot violates an identity or reference invariant.

    Attributes:
        reason: What is inconsistent.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(f"Invalid roster: {reason}")


class FilterDecodeError(RosterFilterError, ValueError):
    """Serialized filter collection could not be decoded.

    Attributes:
        reason: Why decoding failed.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(f"Cannot decode filters: {reason}")
