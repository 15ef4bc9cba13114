# util/errors.py
from typing import Optional
from fastapi import HTTPException, status
from util.enums import ExtractionFailure


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class ExtractionError(Exception):
    """
    A store snapshot could not be produced. Never retried; the whole
    extraction is abandoned and no partial snapshot is returned.
    """

    def __init__(
        self,
        kind: ExtractionFailure,
        *,
        bucket: Optional[str] = None,
        key: Optional[str] = None,
        cause: Optional[BaseException] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.bucket = bucket
        self.key = key
        self.cause = cause
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        parts = [self.kind.value]
        if self.bucket is not None:
            parts.append(f"bucket={self.bucket!r}")
        if self.key is not None:
            parts.append(f"key={self.key}")
        if self.detail:
            parts.append(self.detail)
        if self.cause is not None:
            parts.append(f"cause={type(self.cause).__name__}: {self.cause}")
        return " ".join(parts)
