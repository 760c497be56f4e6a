"""ServiceResult — what every GraphService operation hands back to the CLI.

Block-file and lookup failures travel as ``ok=False`` results with an
:class:`ErrorCode`; the CLI decides how to print them and which exit
code to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from blockgraph.domain.types import ErrorCode

__all__ = ["ErrorCode", "ServiceError", "ServiceResult"]


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one graph operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``"show"``, ``"layout"``, ``"inspect"``, or ``"frame"``.
        data: Plain-data payload (JSON-serializable) on success.
        warnings: Resolver suggestions and other non-fatal findings.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
