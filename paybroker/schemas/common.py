from typing import Optional
from pydantic import BaseModel

class APIResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str
