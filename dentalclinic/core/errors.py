class ClinicError(Exception):
    """Base class for errors raised by the clinic records core."""


class DecodeError(ClinicError, ValueError):
    """A stored line could not be turned back into an entity."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"cannot decode {line!r}: {reason}")
        self.line = line
        self.reason = reason


class MissingReferenceError(ClinicError, LookupError):
    """A record points at an id that is not in the store."""

    def __init__(self, kind: str, id: int):
        super().__init__(f"{kind} {id} not found")
        self.kind = kind
        self.id = id
