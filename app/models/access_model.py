# /app/models/access_model.py

from typing import Optional

from pydantic import BaseModel

from .result_model import ActionResult


class SetAccessCodeRequest(BaseModel):
    code: str


class AccessCodeResult(ActionResult):
    code: Optional[str] = None
