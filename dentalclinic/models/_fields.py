from datetime import time
from typing import Annotated

from pydantic import AfterValidator

# '|' splits fields; the rest are everything str.splitlines() breaks on
FORBIDDEN_CHARS = ("|", "\n", "\r", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029")

def _no_delimiters(value: str) -> str:
    for ch in FORBIDDEN_CHARS:
        if ch in value:
            raise ValueError(f"text may not contain {ch!r}")
    return value

def _naive(value: time) -> time:
    if value.tzinfo is not None:
        raise ValueError("time of day must not carry a UTC offset")
    return value

# free text that is safe to store in a '|'-delimited line
PlainText = Annotated[str, AfterValidator(_no_delimiters)]

# clinic-local time of day; offsets would break ordering and the schedule format
NaiveTime = Annotated[time, AfterValidator(_naive)]
