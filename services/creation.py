"""Criação de parceria a partir do formulário.

O usuário informa identificadores "humanos" (CNPJ da OSC, código da loja,
ID da campanha); cada um é resolvido para o ID interno, em sequência, antes
do POST. A primeira falha interrompe o fluxo e vira a mensagem da tela.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from core.errors import (
    CampaignNotFound,
    InvalidCnpjLength,
    MalformedRecord,
    MissingField,
    NetworkOrServerError,
    OscNotFoundOrAmbiguous,
    StoreNotFoundOrAmbiguous,
    ValidationError,
)
from core.models import Partnership, PartnershipStatus
from core.validators import CNPJ_LENGTH, format_cnpj, parse_number_field, unformat_cnpj
from services.api_client import ApiError
from services.lookups import CampaignsService, OscsService, StoresService
from services.partnerships import PartnershipsService

logger = logging.getLogger(__name__)

STORE_CODE_FIELD = "Código da Loja"
CAMPAIGN_ID_FIELD = "ID da Campanha"


@dataclass
class CreationServices:
    partnerships: PartnershipsService
    oscs: OscsService
    stores: StoresService
    campaigns: CampaignsService


@dataclass
class CreationResult:
    partnership: Optional[Partnership] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


def _resolve_osc_id(services: CreationServices, cnpj_digits: str) -> int:
    try:
        found = services.oscs.get_all(cnpj=cnpj_digits)
    except (ApiError, MalformedRecord) as e:
        raise NetworkOrServerError("Erro ao buscar OSC. Verifique o CNPJ informado.") from e
    if len(found) != 1:
        logger.info("OSC por CNPJ: %d resultados", len(found))
        raise OscNotFoundOrAmbiguous()
    return found[0].id


def _resolve_store_id(services: CreationServices, store_code: float) -> int:
    try:
        found = services.stores.get_all(store_code=store_code)
    except (ApiError, MalformedRecord) as e:
        raise NetworkOrServerError("Erro ao buscar Loja. Verifique o código informado.") from e
    if len(found) != 1:
        logger.info("Loja %s: %d resultados", store_code, len(found))
        raise StoreNotFoundOrAmbiguous()
    return found[0].id


def _ensure_campaign(services: CreationServices, campaign_id: float) -> None:
    try:
        campaign = services.campaigns.get_by_id(campaign_id)
    except ApiError as e:
        if e.is_server_error:
            raise NetworkOrServerError("Erro ao buscar Campanha. Verifique o ID informado.") from e
        raise CampaignNotFound() from e
    except MalformedRecord as e:
        raise NetworkOrServerError("Erro ao buscar Campanha. Verifique o ID informado.") from e
    if not campaign:
        raise CampaignNotFound()


def _run_pipeline(services: CreationServices, osc_cnpj: str, store_code: str,
                  campaign_id: str) -> Partnership:
    osc_cnpj = (osc_cnpj or "").strip()
    store_code = (store_code or "").strip()
    campaign_id = (campaign_id or "").strip()

    if not osc_cnpj or not store_code or not campaign_id:
        raise MissingField()

    store_code_number = parse_number_field(store_code, STORE_CODE_FIELD)
    campaign_id_number = parse_number_field(campaign_id, CAMPAIGN_ID_FIELD)

    cnpj_digits = unformat_cnpj(osc_cnpj)
    if len(cnpj_digits) != CNPJ_LENGTH:
        raise InvalidCnpjLength()

    osc_id = _resolve_osc_id(services, cnpj_digits)
    store_id = _resolve_store_id(services, store_code_number)
    _ensure_campaign(services, campaign_id_number)

    try:
        return services.partnerships.create(
            osc_id=osc_id,
            store_id=store_id,
            campaign_id=campaign_id_number,
            status=PartnershipStatus.PENDENTE,
        )
    except ApiError as e:
        raise NetworkOrServerError(e.message or None) from e
    except MalformedRecord as e:
        raise NetworkOrServerError() from e


def create_partnership(osc_cnpj: str, store_code: str, campaign_id: str, *,
                       services: CreationServices) -> CreationResult:
    try:
        partnership = _run_pipeline(services, osc_cnpj, store_code, campaign_id)
    except ValidationError as e:
        logger.info("Parceria não criada: %s", e.message)
        return CreationResult(error=e)
    except Exception:
        logger.exception("Erro inesperado ao criar parceria")
        return CreationResult(error=NetworkOrServerError())
    logger.info("Parceria %s criada (osc=%s loja=%s)", partnership.id,
                partnership.osc_id, partnership.store_id)
    return CreationResult(partnership=partnership)


class PartnershipForm:
    """Estado do formulário "Nova Parceria" entre reexecuções do Streamlit."""

    def __init__(self, services: CreationServices):
        self.services = services
        self.osc_cnpj = ""
        self.store_code = ""
        self.campaign_id = ""
        self.loading = False
        self.error_message: Optional[str] = None
        self.created: Optional[Partnership] = None

    def set_osc_cnpj(self, value: str) -> None:
        self.osc_cnpj = format_cnpj(value)

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.osc_cnpj and self.store_code and self.campaign_id)

    def submit(self) -> CreationResult:
        self.loading = True
        self.error_message = None
        try:
            result = create_partnership(self.osc_cnpj, self.store_code, self.campaign_id,
                                        services=self.services)
            if result.ok:
                self.created = result.partnership
            else:
                self.error_message = result.message
            return result
        finally:
            self.loading = False
