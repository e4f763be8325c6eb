"""In-process host: serves inputs from memory and records the reported outcome."""
from __future__ import annotations

from collections.abc import Iterable

from ..models import RevealRecord


class LocalProcess:
    """Input source and result reporter for running a phase outside a network node."""

    def __init__(
        self, inputs: bytes = b"", reveals: Iterable[bytes] = ()
    ) -> None:
        self._inputs = inputs
        self._reveals = [RevealRecord(body=body) for body in reveals]
        self.result: bytes | None = None
        self.error_message: bytes | None = None

    # ------------------------------------------------------------------
    # InputSource
    # ------------------------------------------------------------------

    def get_inputs(self) -> bytes:
        return self._inputs

    def get_reveals(self) -> list[RevealRecord]:
        return list(self._reveals)

    # ------------------------------------------------------------------
    # ResultReporter
    # ------------------------------------------------------------------

    @property
    def reported(self) -> bool:
        return self.result is not None or self.error_message is not None

    def _check_not_reported(self) -> None:
        if self.reported:
            raise RuntimeError("Outcome already reported for this process")

    def success(self, payload: bytes) -> None:
        self._check_not_reported()
        self.result = payload

    def error(self, payload: bytes) -> None:
        self._check_not_reported()
        self.error_message = payload

    @property
    def exit_code(self) -> int:
        """0 after success, 1 after an error or when nothing was reported."""
        return 0 if self.result is not None else 1
