"""
Core data model for dflake.

A Discord snowflake packs four fields into a 64-bit unsigned integer:

    TTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTTT WWWWW PPPPP IIIIIIIIIIII
    └──────────── timestamp (42) ───────────┘ └wkr┘ └pid┘ └─increment┘

The timestamp is counted in milliseconds from the Discord epoch
(2015-01-01T00:00:00Z) and is shifted onto the Unix epoch when decoding.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

DISCORD_EPOCH = 1420070400000  # 2015-01-01 UTC (ms)

U64_MAX = 2**64 - 1
MAX_DIGITS = len(str(U64_MAX))

TIMESTAMP_SHIFT = 22
WORKER_ID_MASK = 0x3E0000
WORKER_ID_SHIFT = 17
PROCESS_ID_MASK = 0x1F000
PROCESS_ID_SHIFT = 12
INCREMENT_MASK = 0xFFF


@dataclass(frozen=True, order=True, slots=True)
class Dflake:
    """A decoded snowflake.

    Attributes:
        raw: The 64-bit integer this Dflake was made from
        timestamp: Unix timestamp in milliseconds
        worker_id: Internal worker ID (0-31)
        process_id: Internal process ID (0-31)
        increment: Number of IDs created on the process in the same millisecond (0-4095)
    """

    raw: int
    timestamp: int
    worker_id: int
    process_id: int
    increment: int

    @classmethod
    def from_raw(cls, raw: int, epoch: int = DISCORD_EPOCH) -> Dflake:
        """Split a raw integer into its bit fields.

        The caller is responsible for keeping ``raw`` within 0..U64_MAX.
        """
        return cls(
            raw=raw,
            timestamp=(raw >> TIMESTAMP_SHIFT) + epoch,
            worker_id=(raw & WORKER_ID_MASK) >> WORKER_ID_SHIFT,
            process_id=(raw & PROCESS_ID_MASK) >> PROCESS_ID_SHIFT,
            increment=raw & INCREMENT_MASK,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the fields as a plain dict."""
        return asdict(self)

    def __int__(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return str(self.raw)
