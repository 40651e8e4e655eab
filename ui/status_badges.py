import streamlit as st
from core.models import PartnershipStatus

STATUS_COLORS = {
    PartnershipStatus.ATIVA: "green",
    PartnershipStatus.INATIVA: "red",
    PartnershipStatus.PENDENTE: "orange",
}


def status_label(status: str) -> str:
    status = status or ""
    return status[:1].upper() + status[1:]


def badge_html(status: str) -> str:
    color = STATUS_COLORS.get((status or "").lower(), "gray")
    return f"<span style='padding:4px 8px;border-radius:999px;background:{color};color:white;font-size:12px'>{status_label(status)}</span>"


def badge(status: str):
    st.markdown(badge_html(status), unsafe_allow_html=True)


def toggle_label(status: str) -> str:
    return "Desativar" if (status or "").lower() == PartnershipStatus.ATIVA else "Ativar"
