"""Objetos por navegador guardados em st.session_state.

As páginas pedem sessão, serviços e controlador por aqui em vez de criar os
seus próprios; assim o estado sobrevive às reexecuções do Streamlit.
"""

import streamlit as st

from core.config import get_settings
from core.session import AdminSession, session_from_token
from services.api_client import ApiClient
from services.creation import CreationServices, PartnershipForm
from services.list_controller import PartnershipListController
from services.lookups import CampaignsService, OscsService, StoresService
from services.partnerships import PartnershipsService


def get_session() -> AdminSession:
    if "admin_session" not in st.session_state:
        st.session_state["admin_session"] = session_from_token(get_settings().api_token)
    return st.session_state["admin_session"]


def get_services() -> CreationServices:
    if "services" not in st.session_state:
        client = ApiClient(get_settings(), get_session())
        st.session_state["services"] = CreationServices(
            partnerships=PartnershipsService(client),
            oscs=OscsService(client),
            stores=StoresService(client),
            campaigns=CampaignsService(client),
        )
    return st.session_state["services"]


def get_list_controller() -> PartnershipListController:
    if "list_controller" not in st.session_state:
        st.session_state["list_controller"] = PartnershipListController(get_services().partnerships)
    return st.session_state["list_controller"]


def get_partnership_form(reset: bool = False) -> PartnershipForm:
    if reset or "partnership_form" not in st.session_state:
        st.session_state["partnership_form"] = PartnershipForm(get_services())
    return st.session_state["partnership_form"]


def require_session() -> AdminSession:
    """Mostra o formulário de token e interrompe a página enquanto não houver sessão."""
    session = get_session()
    if session.is_authenticated:
        return session

    st.title("🔐 Acesso ao painel")
    if session.failure_reason:
        st.error(session.failure_reason)
    with st.form("login_token"):
        token = st.text_input("Token de acesso", type="password")
        if st.form_submit_button("Entrar"):
            session.begin()
            session.complete(token.strip())
            st.rerun()
    st.stop()


def entered_page(name: str) -> bool:
    """Registra a página atual; True quando o usuário acabou de chegar nela.

    Reexecuções da mesma página (filtro, botão) devolvem False.
    """
    changed = st.session_state.get("current_page") != name
    st.session_state["current_page"] = name
    return changed
