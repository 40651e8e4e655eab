import streamlit as st
from core.validators import format_cnpj, unformat_cnpj
from core.errors import MalformedRecord
from services.api_client import ApiError
from ui.context import entered_page, get_services, require_session

st.set_page_config(page_title="OSCs", page_icon="🏛️", layout="wide")
require_session()
entered_page("oscs")

st.title("🏛️ Organizações da Sociedade Civil")

try:
    oscs = get_services().oscs.get_all()
except (ApiError, MalformedRecord) as e:
    st.error(f"Erro ao carregar OSCs: {e}")
    st.stop()

search = st.text_input("Buscar", placeholder="Nome ou CNPJ").strip().lower()
if search:
    digits = unformat_cnpj(search)
    oscs = [o for o in oscs if search in o.name.lower() or (digits and digits in unformat_cnpj(o.cnpj))]

if not oscs:
    st.info("Nenhuma OSC encontrada")
else:
    st.dataframe(
        [{"OSC": o.name, "CNPJ": format_cnpj(o.cnpj), "Parcerias": o.partnership_count} for o in oscs],
        hide_index=True,
        use_container_width=True,
    )
