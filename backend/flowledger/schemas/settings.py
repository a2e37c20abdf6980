from pydantic import BaseModel, Field
from typing import Optional, List


class AISettings(BaseModel):
    provider: str
    model: str
    max_tokens: int
    temperature: float
    key_configured: bool


class AISettingsUpdate(BaseModel):
    provider: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(None, gt=0)
    temperature: Optional[float] = Field(None, ge=0, le=2)


class AvailableProvider(BaseModel):
    id: str
    name: str
    requires_key: bool
    models: List[str]


class SettingsResponse(BaseModel):
    ai: AISettings
    available_providers: List[AvailableProvider]
