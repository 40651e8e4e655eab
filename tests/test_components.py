from ui.components import TABLE_COLUMNS, empty_message, format_date, partnerships_dataframe
from ui.status_badges import badge_html, status_label, toggle_label


def test_format_date():
    assert format_date("2024-01-10T12:00:00Z") == "10/01/2024"
    assert format_date("2024-02-01") == "01/02/2024"
    assert format_date("") == "-"
    assert format_date("ontem") == "ontem"


def test_partnerships_dataframe(make_partnership):
    df = partnerships_dataframe([make_partnership(status="pendente")])

    assert list(df.columns) == TABLE_COLUMNS
    row = df.iloc[0]
    assert row["OSC"] == "Casa Verde"
    assert row["Status"] == "Pendente"
    assert row["Campanha"] == "#3"
    assert row["Data Início"] == "10/01/2024"


def test_empty_dataframe_keeps_columns():
    assert list(partnerships_dataframe([]).columns) == TABLE_COLUMNS


def test_empty_message():
    assert empty_message(0) == "Nenhuma parceria encontrada"
    assert empty_message(4) == "Nenhuma parceria corresponde aos filtros aplicados"


def test_badges_and_labels():
    assert status_label("inativa") == "Inativa"
    assert "green" in badge_html("ativa")
    assert "gray" in badge_html("desconhecido")
    assert toggle_label("ativa") == "Desativar"
    assert toggle_label("inativa") == "Ativar"
