import logging
from typing import Any, Optional

from .errors import NotFoundError, ValidationError
from .storage import JsonStore
from .utils.ids import new_id
from .utils.phone import mask_phone
from .utils.times import utc_now_iso

logger = logging.getLogger("yestv.clients")

CLIENTS_DOC = "clients.json"


class ClientDirectory:
    def __init__(self, store: JsonStore, name_template: str = "Cliente {phone}"):
        self.store = store
        self.name_template = name_template

    def list_clients(self) -> list:
        clients = self.store.read(CLIENTS_DOC, [])
        return clients if isinstance(clients, list) else []

    def find_by_phone(self, phone: str) -> Optional[dict]:
        for client in self.list_clients():
            if isinstance(client, dict) and client.get("phone") == phone:
                return client
        return None

    def _default_name(self, phone: str) -> str:
        try:
            return self.name_template.format(phone=phone)
        except (KeyError, IndexError, ValueError):
            return f"Cliente {phone}"

    def ensure_by_phone(self, phone: str) -> Optional[dict]:
        """Return the client for ``phone``, creating it on first sight."""
        normalized = (phone or "").strip()
        if not normalized:
            return None
        with self.store.lock(CLIENTS_DOC):
            clients = self.list_clients()
            for client in clients:
                if isinstance(client, dict) and client.get("phone") == normalized:
                    return client
            client = {
                "id": new_id(),
                "name": self._default_name(normalized),
                "phone": normalized,
                "status": "pending",
                "createdAt": utc_now_iso(),
                "validatedAt": None,
            }
            clients.append(client)
            self.store.write(CLIENTS_DOC, clients)
        logger.info("Created client %s for %s", client["id"], mask_phone(normalized))
        return client

    def update_status(self, client_id: str, status: Any) -> dict:
        if not isinstance(status, str) or not status:
            raise ValidationError("Field 'status' is required.")
        with self.store.lock(CLIENTS_DOC):
            clients = self.list_clients()
            for index, client in enumerate(clients):
                if isinstance(client, dict) and client.get("id") == client_id:
                    break
            else:
                raise NotFoundError("Client not found.")
            updated = dict(client)
            updated["status"] = status
            if status.lower() == "active":
                updated["validatedAt"] = utc_now_iso()
            else:
                updated["validatedAt"] = client.get("validatedAt")
            clients[index] = updated
            self.store.write(CLIENTS_DOC, clients)
        logger.info("Client %s status -> %s", client_id, status)
        return updated
