import pytest

from core.errors import MalformedRecord
from services.lookups import CampaignsService, OscsService, StoresService
from tests.fakes import RecordingClient


def test_oscs_get_all_queries_by_cnpj():
    client = RecordingClient(response=[{"id": 5, "cnpj": "11222333000181", "name": "Casa Verde", "partnership_count": 2}])
    oscs = OscsService(client).get_all(cnpj="11222333000181")

    assert client.calls == [("GET", "/osc/", {"cnpj": "11222333000181", "search": None})]
    assert [(o.id, o.name, o.partnership_count) for o in oscs] == [(5, "Casa Verde", 2)]


def test_oscs_accepts_paginated_results():
    client = RecordingClient(response={"results": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]})
    assert [o.id for o in OscsService(client).get_all()] == [1, 2]


def test_stores_get_all_queries_by_store_code():
    client = RecordingClient(response=[{"id": 9, "store_code": 42, "name": "Loja Centro", "flag": "A"}])
    stores = StoresService(client).get_all(store_code=42)

    assert client.calls == [("GET", "/store/", {"store_code": 42})]
    assert stores[0].id == 9
    assert stores[0].store_code == 42


def test_stores_empty_response():
    assert StoresService(RecordingClient(response=[])).get_all(store_code=1) == []


def test_campaign_get_by_id():
    client = RecordingClient(response={"id": 3, "name": "Natal"})
    campaign = CampaignsService(client).get_by_id(3)

    assert client.calls == [("GET", "/campaign/3", None)]
    assert campaign.id == 3
    assert campaign.name == "Natal"


def test_campaign_missing_returns_none():
    assert CampaignsService(RecordingClient(response=None)).get_by_id(3) is None


@pytest.mark.parametrize("rows", [[{"cnpj": "11222333000181", "name": "X"}], [{"id": None}], ["5"]])
def test_osc_row_without_id_is_malformed(rows):
    with pytest.raises(MalformedRecord):
        OscsService(RecordingClient(response=rows)).get_all(cnpj="11222333000181")


def test_store_row_without_id_is_malformed():
    with pytest.raises(MalformedRecord):
        StoresService(RecordingClient(response=[{"store_code": 42}])).get_all(store_code=42)
