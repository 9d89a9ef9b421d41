# /app/models/result_model.py

from pydantic import BaseModel, Field
from typing import Optional

from ..core.errors import ErrorCode


class ActionResult(BaseModel):
    """
    The uniform envelope every public operation returns. Specific operations
    subclass it to add their payload fields, all of which must be optional so
    a failed result can be built without them.
    """
    success: bool = Field(..., description="Whether the operation completed.")
    error: Optional[str] = Field(None, description="Human-readable failure message.")
    errorCode: Optional[ErrorCode] = Field(None, description="Machine-readable failure category.")

    @classmethod
    def ok(cls, **payload):
        return cls(success=True, **payload)

    @classmethod
    def failure(cls, code: ErrorCode, message: str):
        return cls(success=False, error=message, errorCode=code)
