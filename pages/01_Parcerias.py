import streamlit as st
from core.models import PartnershipStatus
from services.list_controller import ALL_STATUSES
from ui.components import empty_message, partnerships_dataframe, section
from ui.context import entered_page, get_list_controller, require_session
from ui.status_badges import badge, toggle_label

st.set_page_config(page_title="Parcerias", page_icon="🤝", layout="wide")
require_session()

controller = get_list_controller()

# Busca a lista sempre que o usuário entra na página
if entered_page("parcerias"):
    controller.fetch()

head_left, head_right = st.columns([4, 1])
with head_left:
    st.title("Parcerias")
    st.caption("Gerencie as parcerias entre OSCs, lojas e campanhas")
with head_right:
    if st.button("➕ Nova Parceria", use_container_width=True):
        st.switch_page("pages/02_Nova_Parceria.py")

if controller.error:
    st.error(f"Erro ao carregar parcerias: {controller.error}")
    if st.button("🔄 Tentar novamente"):
        controller.fetch()
        st.rerun()
    st.stop()

stats = controller.stats()
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total", stats["total"])
col2.metric("Ativas", stats["ativas"])
col3.metric("Inativas", stats["inativas"])
col4.metric("Pendentes", stats["pendentes"])

# Filtros
STATUS_OPTIONS = {
    ALL_STATUSES: "Todos os status",
    PartnershipStatus.ATIVA: "Ativa",
    PartnershipStatus.INATIVA: "Inativa",
    PartnershipStatus.PENDENTE: "Pendente",
}
fcol1, fcol2 = st.columns([3, 1])
with fcol1:
    search = st.text_input("Buscar", value=controller.search_term, placeholder="Buscar por OSC ou loja...")
with fcol2:
    status = st.selectbox(
        "Status",
        options=list(STATUS_OPTIONS),
        format_func=STATUS_OPTIONS.get,
        index=list(STATUS_OPTIONS).index(controller.status_filter),
    )
controller.set_search_term(search)
controller.set_status_filter(status)

if controller.toggle_error:
    st.warning(controller.toggle_error)

section("Lista")
rows = controller.filtered

if controller.loading:
    st.info("Carregando parcerias...")
elif not rows:
    st.info(empty_message(len(controller.partnerships)))
else:
    st.dataframe(partnerships_dataframe(rows), hide_index=True, use_container_width=True)

    st.subheader("Ações")
    for p in rows:
        cols = st.columns([3, 3, 1, 1])
        cols[0].write(f"**{p.osc}**")
        cols[1].write(p.loja)
        with cols[2]:
            badge(p.status)
        with cols[3]:
            if st.button(toggle_label(p.status), key=f"toggle_{p.id}",
                         disabled=not controller.can_toggle(p), use_container_width=True):
                controller.toggle_status(p)
                st.rerun()
