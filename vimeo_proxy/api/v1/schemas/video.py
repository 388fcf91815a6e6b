from pydantic import BaseModel
from typing import Any, Optional

class VideoEnvelope(BaseModel):
    success: bool = True
    data: Any = None

class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
