from typing import Any, Dict, Optional
from fastapi import Depends, FastAPI, Query, Request
import logging
import uvicorn
from backend.auth.function_key import function_key_auth
from backend.config import API_HOST, API_PORT, LOG_LEVEL
# Importa serviço de validação do módulo dedicado
from backend.api.services.cpf_service import CpfValidationService

logger = logging.getLogger(__name__)

app = FastAPI(title="Valida CPF API", version="1.0.0")

cpf_service = CpfValidationService()


######### Validação de CPF (rota única)
@app.api_route("/api/fnvalidacpf", methods=["GET", "POST"])
async def fn_valida_cpf(
    request: Request,
    cpf: Optional[str] = Query(default=None, description="CPF com ou sem pontuação"),
    _: str = Depends(function_key_auth),
) -> Dict[str, Any]:
    """
    Valida um CPF informado via query (?cpf=...) ou corpo JSON { "cpf": "..." }.
    Parâmetros:
        request (Request): requisição HTTP (método e corpo)
        cpf (str, opcional): CPF da query string
        _: autorização por chave de função
    Retorno:
        dict: cpf, status e mensagem quando o CPF é válido
    """
    logger.info("Iniciando a validação do CPF.")
    body = await request.body() if request.method == "POST" else b""
    candidate = cpf_service.extract_cpf(cpf, request.method, body)
    return cpf_service.validate(candidate)


if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL)
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
