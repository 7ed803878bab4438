"""Error markers returned by engine operations."""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Recoverable failure categories."""

    INVALID_QUANTITY = "invalid_quantity"
    NO_MEASUREMENT_AVAILABLE = "no_measurement_available"
    INCOMPLETE_PROFILE = "incomplete_profile"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class EngineError:
    """Explicit error result with a human-readable reason."""

    kind: ErrorKind
    reason: str

    def as_record(self) -> dict[str, str]:
        return {"kind": self.kind.value, "reason": self.reason}
