"""Running process model."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessInfo:
    """A process found by a command-line pattern search.

    Attributes:
        pid: Process ID.
        command: Command name as reported by ps.
    """

    pid: int
    command: str
