# Consultas às coleções de OSCs, Lojas e Campanhas
import logging
from typing import Any, Dict, List, Optional

from core.errors import MalformedRecord
from core.models import Campaign, Osc, Store
from services.api_client import ApiClient

logger = logging.getLogger(__name__)


def _as_list(data: Any) -> List[Dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, dict):
        # algumas rotas devolvem {"results": [...]} ou um único objeto
        if isinstance(data.get("results"), list):
            return data["results"]
        return [data]
    if not isinstance(data, list):
        raise MalformedRecord(f"Lista esperada, recebido {type(data).__name__}")
    return data


def _row(raw: Any, entity: str) -> Dict[str, Any]:
    if not isinstance(raw, dict) or raw.get("id") is None:
        raise MalformedRecord(f"{entity} sem 'id': {raw!r}")
    return raw


class OscsService:
    endpoint = "/osc/"

    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self, cnpj: Optional[str] = None, search: Optional[str] = None) -> List[Osc]:
        rows = _as_list(self.client.get(self.endpoint, {"cnpj": cnpj, "search": search}))
        oscs = []
        for raw in rows:
            r = _row(raw, "OSC")
            oscs.append(Osc(id=r["id"], cnpj=r.get("cnpj") or "", name=r.get("name") or "",
                            partnership_count=r.get("partnership_count") or 0))
        return oscs


class StoresService:
    endpoint = "/store/"

    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self, store_code: Optional[int] = None) -> List[Store]:
        rows = _as_list(self.client.get(self.endpoint, {"store_code": store_code}))
        stores = []
        for raw in rows:
            r = _row(raw, "Loja")
            stores.append(Store(id=r["id"], store_code=r.get("store_code"), name=r.get("name") or "",
                                flag=r.get("flag") or "", partnership_count=r.get("partnership_count") or 0))
        return stores


class CampaignsService:
    endpoint = "/campaign/"

    def __init__(self, client: ApiClient):
        self.client = client

    def get_by_id(self, campaign_id: int) -> Optional[Campaign]:
        data = self.client.get(f"{self.endpoint}{campaign_id}")
        if not data:
            return None
        if not isinstance(data, dict):
            raise MalformedRecord(f"Campanha inválida: {data!r}")
        return Campaign(id=data.get("id", campaign_id), name=data.get("name") or "")
