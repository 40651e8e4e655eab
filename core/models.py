from dataclasses import dataclass
from typing import Optional

class PartnershipStatus:
    ATIVA = "ativa"
    INATIVA = "inativa"
    PENDENTE = "pendente"

    ALL = (ATIVA, INATIVA, PENDENTE)
    TOGGLEABLE = (ATIVA, INATIVA)


# Status numérico do backend -> rótulo exibido
STATUS_BY_NUMBER = {
    0: PartnershipStatus.PENDENTE,
    1: PartnershipStatus.ATIVA,
    2: PartnershipStatus.INATIVA,
}


def status_from_number(value) -> str:
    """Converte o status numérico da API. Qualquer valor desconhecido vira 'pendente'."""
    if isinstance(value, bool) or not isinstance(value, int):
        return PartnershipStatus.PENDENTE
    return STATUS_BY_NUMBER.get(value, PartnershipStatus.PENDENTE)


def toggled_status(status: str) -> Optional[str]:
    current = (status or "").lower()
    if current == PartnershipStatus.ATIVA:
        return PartnershipStatus.INATIVA
    if current == PartnershipStatus.INATIVA:
        return PartnershipStatus.ATIVA
    return None


@dataclass
class Partnership:
    id: int
    osc: str
    loja: str
    data_inicio: str  # created_at
    data_vencimento: str  # updated_at
    status: str  # ativa | inativa | pendente
    campanhas: int
    store_id: int
    osc_id: int


@dataclass
class Osc:
    id: int
    cnpj: str
    name: str
    partnership_count: int = 0


@dataclass
class Store:
    id: int
    store_code: int
    name: str
    flag: str = ""
    partnership_count: int = 0


@dataclass
class Campaign:
    id: int
    name: str = ""
