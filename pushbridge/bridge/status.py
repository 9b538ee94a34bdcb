import logging
from typing import Any

from pushbridge.services.gate import ServiceGate

logger = logging.getLogger(__name__)


class StatusBridge:
    """Answers ``ensure`` with ``{"ready": bool}`` and never rejects."""

    def __init__(self, gate: ServiceGate, context: Any, name: str = "FirebaseStatus"):
        self.gate = gate
        self.context = context
        self.name = name

    @property
    def methods(self):
        return {"ensure": self.ensure}

    def ensure(self, payload: dict[str, Any] | None = None) -> dict[str, bool]:
        try:
            ready = self.gate.ensure_initialized(self.context)
        except Exception:
            logger.exception("Service gate raised during ensure")
            ready = False
        if not ready:
            logger.error(
                "Push SDK initialization failed. Double-check the credentials file matches the project."
            )
        return {"ready": bool(ready)}
