import streamlit as st
from core.config import get_settings
from core.logging_config import configure_logging
from ui.context import entered_page, get_list_controller, require_session

st.set_page_config(
    page_title="Painel de Parcerias",
    page_icon="🤝",
    layout="wide"
)

configure_logging(get_settings().log_level)
require_session()

st.title("🤝 Painel de Parcerias — Dashboard")

controller = get_list_controller()
if entered_page("dashboard"):
    controller.fetch()

if controller.error:
    st.error(f"Erro ao carregar parcerias: {controller.error}")
else:
    stats = controller.stats()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total", stats["total"], help="Parcerias cadastradas")
    col2.metric("Ativas", stats["ativas"], help="Em funcionamento")
    col3.metric("Inativas", stats["inativas"], help="Desativadas")
    col4.metric("Pendentes", stats["pendentes"], help="Aguardando aprovação")

st.info("Use o menu 'pages' à esquerda para gerenciar parcerias e OSCs.")
