"""Host bridge transport."""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from miniapp.services.bridge.payloads import AdminSyncPayload, OrderPayload

logger = logging.getLogger(__name__)

Payload = Union[OrderPayload, AdminSyncPayload]


def serialize_payload(payload: Payload) -> str:
    """JSON text as passed to ``Telegram.WebApp.sendData``."""
    return payload.model_dump_json()


class HostBridge(ABC):
    """Abstract base class for the channel to the hosting Telegram client."""

    @abstractmethod
    def send_payload(self, session_id: str, data: str) -> None:
        """Hand serialized data to the host. Fire-and-forget."""
        pass

    @abstractmethod
    def discard(self, session_id: str) -> None:
        """Drop anything kept for a closed session."""
        pass


class OutboxBridge(HostBridge):
    """Keeps sent payloads per session for the web shell to forward.

    The Mini App page picks up the serialized payload from the API response
    and calls ``Telegram.WebApp.sendData`` with it.
    """

    def __init__(self):
        self._outbox: Dict[str, List[str]] = {}

    def send_payload(self, session_id: str, data: str) -> None:
        self._outbox.setdefault(session_id, []).append(data)
        logger.info(
            f"[BRIDGE] Payload queued - Session: {session_id}, length: {len(data)} bytes"
        )

    def sent(self, session_id: str) -> List[str]:
        """Payloads sent for a session, oldest first."""
        return list(self._outbox.get(session_id, []))

    def last(self, session_id: str) -> Optional[str]:
        sent = self._outbox.get(session_id)
        return sent[-1] if sent else None

    def discard(self, session_id: str) -> None:
        self._outbox.pop(session_id, None)
