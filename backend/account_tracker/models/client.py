"""Client (team) record tracked by the weekly survey."""
from datetime import datetime
from pydantic import BaseModel


class Client(BaseModel):
    id: int
    name: str
    active: bool = True
    created_at: datetime
