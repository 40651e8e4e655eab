import streamlit as st
from core.validators import format_cnpj
from ui.context import entered_page, get_partnership_form, require_session

st.set_page_config(page_title="Nova Parceria", page_icon="➕", layout="wide")
require_session()
entered_page("nova_parceria")

form = get_partnership_form()

st.title("Nova Parceria")
st.caption("Crie uma nova parceria associando uma Organização da Sociedade Civil (OSC), Loja e Campanha.")

if form.error_message:
    st.error(form.error_message)


def _mask_cnpj():
    # reaplica a máscara XX.XXX.XXX/XXXX-XX a cada edição
    st.session_state["osc_cnpj"] = format_cnpj(st.session_state["osc_cnpj"])


st.subheader("Dados da Parceria")
st.caption("Insira o CNPJ da OSC, código da Loja e ID da Campanha para criar uma nova parceria.")

col1, col2 = st.columns(2)
with col1:
    form.set_osc_cnpj(st.text_input("CNPJ da OSC", key="osc_cnpj", placeholder="00.000.000/0000-00",
                                    max_chars=18, on_change=_mask_cnpj, disabled=form.loading))
with col2:
    form.store_code = st.text_input("Código da Loja", key="store_code",
                                    placeholder="Digite o código da loja", disabled=form.loading)
form.campaign_id = st.text_input("ID da Campanha", key="campaign_id",
                                 placeholder="Digite o ID da Campanha", disabled=form.loading)

bcol1, bcol2, _ = st.columns([1, 1, 4])
with bcol1:
    submitted = st.button("Salvar", type="primary", disabled=not form.can_submit, use_container_width=True)
with bcol2:
    cancelled = st.button("Cancelar", disabled=form.loading, use_container_width=True)

if cancelled:
    get_partnership_form(reset=True)
    st.switch_page("pages/01_Parcerias.py")

if submitted:
    with st.spinner("Salvando..."):
        result = form.submit()
    if result.ok:
        get_partnership_form(reset=True)
        for key in ("osc_cnpj", "store_code", "campaign_id"):
            st.session_state.pop(key, None)
        st.switch_page("pages/01_Parcerias.py")
    else:
        st.rerun()
