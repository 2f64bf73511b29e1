from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """The single greeting served and replaced over HTTP."""

    message: str
