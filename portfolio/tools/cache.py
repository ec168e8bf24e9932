"""Result cache — latest result envelope per tool id."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .registry import is_error_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultEnvelope:
    tool_id: str
    category: str
    payload: Any
    sequence: int = 0

    @property
    def is_error(self) -> bool:
        return is_error_payload(self.payload)


class ResultCache:
    """In-memory map tool id -> ResultEnvelope, unbounded for the owner's lifetime.

    Each execution takes a ticket from next_sequence() before running. A write
    is dropped when a later ticket for the same tool has already been written,
    so a slow superseded call cannot clobber a fresher result.
    """

    def __init__(self):
        self._entries: Dict[str, ResultEnvelope] = {}
        self._issued: Dict[str, int] = {}

    def next_sequence(self, tool_id: str) -> int:
        seq = self._issued.get(tool_id, 0) + 1
        self._issued[tool_id] = seq
        return seq

    def set(self, tool_id: str, envelope: ResultEnvelope) -> bool:
        current = self._entries.get(tool_id)
        if current is not None and envelope.sequence and current.sequence > envelope.sequence:
            logger.info(
                f"Dropping stale result for {tool_id} "
                f"(seq {envelope.sequence} < {current.sequence})"
            )
            return False
        self._entries[tool_id] = envelope
        return True

    def get(self, tool_id: str) -> Optional[ResultEnvelope]:
        return self._entries.get(tool_id)

    def clear(self):
        """Drop results. Tickets keep counting so in-flight calls stay older than later ones."""
        self._entries.clear()

    def __contains__(self, tool_id: str) -> bool:
        return tool_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
