"""Versioned metadata recorded alongside a committed edit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..config import ADJUSTMENT_FORMAT_IDENTIFIER, ADJUSTMENT_FORMAT_VERSION
from ..utils.jsonio import dumps_payload, loads_payload

INVERSION_MARKER: dict[str, Any] = {"inversion": True}


@dataclass(frozen=True)
class AdjustmentData:
    """Opaque record identifying the extension that produced an edit."""

    format_identifier: str
    format_version: str
    data: bytes = field(default=b"", repr=False)

    def payload(self) -> dict[str, Any]:
        """Decode :attr:`data`; raises ``AdjustmentDataError`` when malformed."""

        return loads_payload(self.data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "formatIdentifier": self.format_identifier,
            "formatVersion": self.format_version,
            "payload": self.payload() if self.data else {},
        }


def build_adjustment_data() -> AdjustmentData:
    """Return the record written when an inversion edit is committed.

    The payload is a bare marker; the black/white point is not stored, so a
    later session cannot reconstruct the exact adjustment.
    """

    return AdjustmentData(
        ADJUSTMENT_FORMAT_IDENTIFIER,
        ADJUSTMENT_FORMAT_VERSION,
        dumps_payload(INVERSION_MARKER),
    )


def can_handle(adjustment_data: Optional[AdjustmentData]) -> bool:
    """Report whether a prior edit can be resumed.

    Always ``False``: every edit restarts from the full-resolution original.
    """

    return False


__all__ = ["AdjustmentData", "INVERSION_MARKER", "build_adjustment_data", "can_handle"]
