"""Lambda invocation result model."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict


class InvocationResult(BaseModel):
    """Raw output of a Lambda ``Invoke`` call.

    ``function_error`` is set (``"Unhandled"`` or ``"Handled"``) when the
    function itself failed; the payload then holds the error document.  The
    call still counts as a successful invocation.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    payload: bytes = b""
    function_error: str | None = None
    executed_version: str | None = None
    log_result: str | None = None  # base64 tail of the execution log

    @property
    def ok(self) -> bool:
        return self.function_error is None and 200 <= self.status_code < 300

    def decode_payload(self) -> Any:
        """Decode the payload as JSON (``None`` for an empty payload)."""
        if not self.payload:
            return None
        return json.loads(self.payload)
