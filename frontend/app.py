import streamlit as st
import httpx
import asyncio
import os
from typing import Optional

API_BASE = os.getenv("API_BASE", "http://api:3000")  # service name in docker network
VALIDA_CPF_URL = f"{API_BASE}/api/fnvalidacpf"

st.set_page_config(page_title="Valida CPF", page_icon="🪪", layout="centered")

# -------------- Helpers --------------
async def fetch_json(client: httpx.AsyncClient, method: str, url: str, **kwargs):
    try:
        resp = await client.request(method, url, timeout=10, **kwargs)
        if resp.headers.get("content-type", "").startswith("application/json"):
            data = resp.json()
        else:
            data = {"raw": resp.text}
        if resp.is_error:
            return False, data, resp.status_code
        return True, data, resp.status_code
    except httpx.HTTPError as e:
        return False, {"error": str(e)}, 0

async def validate_cpf(client, cpf: str, method: str, function_key: Optional[str]):
    headers = {"x-functions-key": function_key} if function_key else {}
    if method == "GET":
        return await fetch_json(client, "GET", VALIDA_CPF_URL, params={"cpf": cpf}, headers=headers)
    return await fetch_json(client, "POST", VALIDA_CPF_URL, json={"cpf": cpf}, headers=headers)

# -------------- UI --------------
st.title("🪪 Validação de CPF")
st.caption("Confere apenas os dígitos verificadores; não consulta nenhum cadastro externo.")

async def main_ui():
    with st.form("cpf_form"):
        cpf = st.text_input("CPF", placeholder="111.444.777-35")
        method = st.radio("Enviar via", ["GET", "POST"], horizontal=True)
        function_key = st.text_input("Chave de função (x-functions-key)", type="password")
        submitted = st.form_submit_button("Validar")
    if not submitted:
        return
    if not cpf.strip():
        st.warning("Informe um CPF.")
        return
    async with httpx.AsyncClient() as client:
        ok, data, status_code = await validate_cpf(client, cpf, method, function_key or None)
    if ok:
        st.success(data.get("message", "CPF válido."))
    elif status_code == 0:
        st.error(f"Falha ao chamar a API: {data.get('error')}")
    else:
        st.error(f"[{status_code}] {data.get('detail', data)}")

asyncio.run(main_ui())
