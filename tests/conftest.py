"""Configuração do pytest para o painel de parcerias."""

import sys
from pathlib import Path

import pytest

# Raiz do repositório no PYTHONPATH (core/, services/, ui/ são pacotes soltos)
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from core.models import Partnership  # noqa: E402
from services.creation import CreationServices  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeCampaignsService,
    FakeOscsService,
    FakePartnershipsService,
    FakeStoresService,
)


@pytest.fixture
def make_partnership():
    def _make(id=1, osc="Casa Verde", loja="Loja Centro", status="ativa", **kwargs):
        data = dict(
            id=id,
            osc=osc,
            loja=loja,
            data_inicio="2024-01-10T12:00:00Z",
            data_vencimento="2024-02-01T08:30:00Z",
            status=status,
            campanhas=3,
            store_id=9,
            osc_id=5,
        )
        data.update(kwargs)
        return Partnership(**data)

    return _make


@pytest.fixture
def services():
    """Serviços em memória: CNPJ 11222333000181 -> OSC 5, loja 42 -> id 9, campanha 3."""
    return CreationServices(
        partnerships=FakePartnershipsService(),
        oscs=FakeOscsService({"11222333000181": [5]}),
        stores=FakeStoresService({42: [9]}),
        campaigns=FakeCampaignsService({3}),
    )
