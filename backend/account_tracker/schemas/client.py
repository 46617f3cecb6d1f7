from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ClientCreate(BaseModel):
    # Optional so a missing name reaches the handler and gets the 400 message
    name: Optional[str] = None


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    active: Optional[bool] = None


class ClientSummary(BaseModel):
    id: int
    name: str


class ClientRecord(ClientSummary):
    active: bool
    created_at: datetime

    class Config:
        from_attributes = True
