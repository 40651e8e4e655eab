from datetime import datetime
from typing import Iterable

import pandas as pd
import streamlit as st

from core.models import Partnership
from ui.status_badges import status_label

TABLE_COLUMNS = ["OSC", "Loja", "Data Início", "Atualizado em", "Status", "Campanha"]


def section(title: str):
    st.subheader(title)
    st.divider()


def format_date(value: str) -> str:
    """ISO-8601 -> dd/mm/aaaa; '-' se vazio, o texto original se não der para ler."""
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%d/%m/%Y")
    except ValueError:
        return value


def partnerships_dataframe(rows: Iterable[Partnership]) -> pd.DataFrame:
    data = [
        {
            "OSC": p.osc,
            "Loja": p.loja,
            "Data Início": format_date(p.data_inicio),
            "Atualizado em": format_date(p.data_vencimento),
            "Status": status_label(p.status),
            "Campanha": f"#{p.campanhas}",
        }
        for p in rows
    ]
    return pd.DataFrame(data, columns=TABLE_COLUMNS)


def empty_message(total: int) -> str:
    if total == 0:
        return "Nenhuma parceria encontrada"
    return "Nenhuma parceria corresponde aos filtros aplicados"
