"""The whole tracker dataset as persisted in one JSON document."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from account_tracker.models.client import Client
from account_tracker.models.survey import SurveyResponse


class Dataset(BaseModel):
    """
    Clients, responses and the two id counters.

    Ids are handed out only through add_client / add_response, so they are
    never reused and the counters only move forward.
    """

    clients: List[Client] = Field(default_factory=list)
    responses: List[SurveyResponse] = Field(default_factory=list)
    next_client_id: int = Field(1, alias="nextClientId")
    next_response_id: int = Field(1, alias="nextResponseId")

    class Config:
        populate_by_name = True

    def find_client(self, client_id: int) -> Optional[Client]:
        return next((c for c in self.clients if c.id == client_id), None)

    def find_client_by_name(self, name: str) -> Optional[Client]:
        """Case-insensitive lookup across active and inactive clients."""
        key = name.lower()
        return next((c for c in self.clients if c.name.lower() == key), None)

    def add_client(self, name: str, created_at: datetime) -> Client:
        client = Client(id=self.next_client_id, name=name, active=True, created_at=created_at)
        self.next_client_id += 1
        self.clients.append(client)
        return client

    def add_response(self, **fields) -> SurveyResponse:
        response = SurveyResponse(id=self.next_response_id, **fields)
        self.next_response_id += 1
        self.responses.append(response)
        return response

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
