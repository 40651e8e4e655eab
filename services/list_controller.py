import logging
from typing import Callable, Dict, Iterable, List, Optional, Set

from core.errors import MalformedRecord
from core.models import Partnership, PartnershipStatus, toggled_status
from services.api_client import ApiError
from services.partnerships import PartnershipsService

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"


def filter_partnerships(partnerships: Iterable[Partnership], search_term: str = "",
                        status_filter: str = ALL_STATUSES) -> List[Partnership]:
    """Busca por OSC OU loja (sem diferenciar maiúsculas) + filtro exato de status."""
    rows = list(partnerships)
    term = (search_term or "").lower()
    if term:
        rows = [p for p in rows if term in p.osc.lower() or term in p.loja.lower()]
    wanted = (status_filter or ALL_STATUSES).lower()
    if wanted != ALL_STATUSES:
        rows = [p for p in rows if p.status.lower() == wanted]
    return rows


class PartnershipListController:
    def __init__(self, service: PartnershipsService):
        self.service = service
        self.partnerships: List[Partnership] = []
        self.loading = False
        self.error: Optional[str] = None
        self.toggle_error: Optional[str] = None
        self.search_term = ""
        self.status_filter = ALL_STATUSES
        self._in_flight: Set[int] = set()
        self._listeners: List[Callable[["PartnershipListController"], None]] = []

    # -- observadores -------------------------------------------------------

    def subscribe(self, listener: Callable[["PartnershipListController"], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- estado derivado ----------------------------------------------------

    @property
    def filtered(self) -> List[Partnership]:
        return filter_partnerships(self.partnerships, self.search_term, self.status_filter)

    def set_search_term(self, term: str) -> None:
        if term != self.search_term:
            self.search_term = term or ""
            self._notify()

    def set_status_filter(self, status: str) -> None:
        if status != self.status_filter:
            self.status_filter = status or ALL_STATUSES
            self._notify()

    def stats(self) -> Dict[str, int]:
        counts = {s: 0 for s in PartnershipStatus.ALL}
        for p in self.partnerships:
            status = p.status.lower()
            if status in counts:
                counts[status] += 1
        return {
            "total": len(self.partnerships),
            "ativas": counts[PartnershipStatus.ATIVA],
            "inativas": counts[PartnershipStatus.INATIVA],
            "pendentes": counts[PartnershipStatus.PENDENTE],
        }

    # -- ações --------------------------------------------------------------

    def fetch(self) -> None:
        self.loading = True
        self._notify()
        try:
            self.partnerships = self.service.get_all()
            self.error = None
        except (ApiError, MalformedRecord) as e:
            # mantém a lista anterior
            self.error = str(e) or "Falha ao carregar parcerias"
        finally:
            self.loading = False
            self._notify()

    def can_toggle(self, partnership: Partnership) -> bool:
        if self.loading or partnership.id in self._in_flight:
            return False
        return partnership.status.lower() in PartnershipStatus.TOGGLEABLE

    def toggle_status(self, partnership: Partnership) -> bool:
        """Alterna ativa <-> inativa e recarrega a lista. Retorna False se nada foi enviado."""
        new_status = toggled_status(partnership.status)
        if new_status is None:
            return False
        if self.loading:
            logger.info("Lista recarregando; status da parceria %s não alterado", partnership.id)
            return False
        if partnership.id in self._in_flight:
            logger.info("Parceria %s já tem atualização em andamento", partnership.id)
            return False

        self._in_flight.add(partnership.id)
        self.toggle_error = None
        self._notify()
        try:
            self.service.update(
                partnership.id,
                status=new_status,
                store_id=partnership.store_id,
                osc_id=partnership.osc_id,
            )
        except (ApiError, MalformedRecord) as e:
            logger.warning("Erro ao atualizar status da parceria %s: %s", partnership.id, e)
            self.toggle_error = f"Erro ao atualizar status: {e}"
            return False
        finally:
            self._in_flight.discard(partnership.id)
            self._notify()

        self.fetch()
        return True
