from __future__ import annotations

import logging

from models.schemas import AlertMessage, Severity
from services.interfaces import AlertSink

logger = logging.getLogger(__name__)


class CoolingDevice:
    """Stand-in for a cooling unit; nothing in the control path calls it yet."""

    def __init__(self, sink: AlertSink) -> None:
        self.sink = sink

    def turn_on(self) -> None:
        logger.info("Cooling device switched on")
        self.sink.emit(AlertMessage(severity=Severity.info, text="Cooling Device turned on."))

    def turn_off(self) -> None:
        logger.info("Cooling device switched off")
        self.sink.emit(AlertMessage(severity=Severity.info, text="Cooling Device turned off."))
