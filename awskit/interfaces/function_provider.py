"""Abstract base class for serverless function providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from awskit.models.functions import InvocationResult


# Concrete implementation: LambdaFunctionProvider (awskit/providers/functions/)
class IFunctionProvider(ABC):
    """Contract for invoking named remote functions."""

    @abstractmethod
    async def invoke(self, function_name: str, request: Any) -> InvocationResult:
        """Serialize *request* and invoke *function_name* synchronously.

        Parameters
        ----------
        function_name:
            Function name, ARN, or ``name:alias``.
        request:
            Any JSON-serializable value, or a pydantic model.

        Returns
        -------
        InvocationResult
            The raw invocation output.  A failure *inside* the function is
            reported through ``InvocationResult.function_error``, not raised.

        Raises
        ------
        awskit.utils.errors.FunctionInvocationError
            If the request cannot be serialized or the invoke call fails.
        """
