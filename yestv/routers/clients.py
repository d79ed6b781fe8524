from typing import Optional

from fastapi import APIRouter, Depends

from ..clients import ClientDirectory
from ..deps import get_clients
from ..schemas import ClientStatusIn


router = APIRouter(prefix="/admin/clients", tags=["clients"])


@router.get("")
def list_clients(clients: ClientDirectory = Depends(get_clients)):
    return clients.list_clients()


@router.patch("/{client_id}")
def update_client_status(
    client_id: str,
    payload: Optional[ClientStatusIn] = None,
    clients: ClientDirectory = Depends(get_clients),
):
    payload = payload or ClientStatusIn()
    return clients.update_status(client_id, payload.status)
