"""Clients API — registration, listing, rename/reactivate and soft delete."""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.schemas.client import ClientCreate, ClientUpdate, ClientSummary, ClientRecord
from account_tracker.services.reporting import ReportingService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("", response_model=List[ClientSummary])
def list_active_clients(storage: JsonFileStorage = Depends(get_storage)):
    """Active clients by name — feeds the survey form."""
    service = ReportingService(storage.load())
    return [{"id": c.id, "name": c.name} for c in service.active_clients()]


@router.get("/all", response_model=List[ClientRecord])
def list_all_clients(storage: JsonFileStorage = Depends(get_storage)):
    """Admin — every client including soft-deleted ones."""
    service = ReportingService(storage.load())
    return [c.model_dump() for c in service.all_clients()]


@router.post("", status_code=201, response_model=ClientSummary)
def create_client(payload: ClientCreate, storage: JsonFileStorage = Depends(get_storage)):
    name = (payload.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Client name required")

    with storage.transaction() as dataset:
        # Names are unique regardless of active flag
        if dataset.find_client_by_name(name):
            raise HTTPException(status_code=409, detail="Client already exists")
        client = dataset.add_client(name, created_at=datetime.now(timezone.utc))

    logger.info(f"Client created: id={client.id}, name={client.name!r}")
    return {"id": client.id, "name": client.name}


@router.put("/{client_id:int}")
def update_client(
    client_id: int,
    payload: Optional[ClientUpdate] = None,
    storage: JsonFileStorage = Depends(get_storage),
):
    """Rename and/or (de)activate. Fields left out of the body, or no body at all, are untouched."""
    payload = payload or ClientUpdate()
    with storage.transaction() as dataset:
        client = dataset.find_client(client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")

        if payload.name is not None:
            client.name = payload.name
        if payload.active is not None:
            client.active = payload.active

    logger.info(f"Client updated: id={client_id}, name={client.name!r}, active={client.active}")
    return {"success": True}


@router.delete("/{client_id:int}")
def delete_client(client_id: int, storage: JsonFileStorage = Depends(get_storage)):
    """Soft delete. Unknown ids are a no-op so the call is idempotent."""
    with storage.transaction() as dataset:
        client = dataset.find_client(client_id)
        if client:
            client.active = False
            logger.info(f"Client deactivated: id={client_id}")

    return {"success": True}
