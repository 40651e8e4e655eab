import logging
from typing import Any, Dict, List, Optional

from core.errors import MalformedRecord
from core.models import Partnership, PartnershipStatus, status_from_number
from services.api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)


def _nested(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    obj = raw.get(key)
    if not isinstance(obj, dict) or "id" not in obj or "name" not in obj:
        raise MalformedRecord(f"Parceria {raw.get('id')!r} sem '{key}' válido")
    return obj


def map_raw_partnership(raw: Dict[str, Any]) -> Partnership:
    """Registro da API (status numérico, store/osc aninhados) -> linha da tela."""
    if not isinstance(raw, dict):
        raise MalformedRecord(f"Registro de parceria inválido: {raw!r}")
    store = _nested(raw, "store")
    osc = _nested(raw, "osc")
    return Partnership(
        id=raw.get("id"),
        osc=osc["name"],
        loja=store["name"],
        data_inicio=raw.get("created_at") or "",
        data_vencimento=raw.get("updated_at") or "",
        status=status_from_number(raw.get("status")),
        campanhas=raw.get("campaign") or 0,
        store_id=store["id"],
        osc_id=osc["id"],
    )


class PartnershipsService:
    endpoint = "/partnership/"

    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self, search: Optional[str] = None, status: Optional[str] = None,
                page: Optional[int] = None, limit: Optional[int] = None) -> List[Partnership]:
        params = {"search": search, "status": status, "page": page, "limit": limit}
        try:
            data = self.client.get(self.endpoint, params)
        except ApiError:
            logger.exception("Erro ao buscar parcerias")
            raise
        return [map_raw_partnership(raw) for raw in (data or [])]

    def create(self, osc_id: int, store_id: int, campaign_id: int,
               status: str = PartnershipStatus.PENDENTE) -> Partnership:
        body = {"oscId": osc_id, "storeId": store_id, "campanhas": campaign_id, "status": status}
        try:
            data = self.client.post(self.endpoint, body)
        except ApiError:
            logger.exception("Erro ao criar parceria")
            raise
        return map_raw_partnership(data)

    def update(self, partnership_id: int, status: Optional[str] = None,
               store_id: Optional[int] = None, osc_id: Optional[int] = None) -> Partnership:
        # status vai como rótulo ("ativa"/"inativa"), não como número
        body = {"status": status, "storeId": store_id, "oscId": osc_id}
        body = {k: v for k, v in body.items() if v is not None}
        try:
            data = self.client.put(f"{self.endpoint}{partnership_id}", body)
        except ApiError:
            logger.exception("Erro ao atualizar parceria %s", partnership_id)
            raise
        return map_raw_partnership(data)
