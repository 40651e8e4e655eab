import pytest

from core.models import PartnershipStatus, status_from_number, toggled_status


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "pendente"),
        (1, "ativa"),
        (2, "inativa"),
        (3, "pendente"),
        (-1, "pendente"),
        (99, "pendente"),
    ],
)
def test_status_from_number(value, expected):
    assert status_from_number(value) == expected


def test_status_mapping_is_total_over_a_wide_range():
    for n in range(-50, 50):
        label = status_from_number(n)
        assert (label == "ativa") == (n == 1)
        assert (label == "inativa") == (n == 2)
        if n not in (1, 2):
            assert label == "pendente"


@pytest.mark.parametrize("value", [None, "1", 1.0, True, {}])
def test_non_integer_status_defaults_to_pendente(value):
    assert status_from_number(value) == PartnershipStatus.PENDENTE


def test_toggled_status_only_flips_active_and_inactive():
    assert toggled_status("ativa") == "inativa"
    assert toggled_status("Inativa") == "ativa"
    assert toggled_status("pendente") is None
    assert toggled_status("") is None
