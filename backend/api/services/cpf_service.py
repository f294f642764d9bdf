"""
Serviço de validação de CPF: extrai o CPF da requisição, valida e monta a resposta.
Mantém a rota fina e facilita testes.
"""
from typing import Any, Dict, Optional
from fastapi import HTTPException
import json
import logging
from backend.utils.cpf_utils import CPFCheck, CPFUtils

MISSING_CPF_DETAIL = 'Por favor, forneça um CPF via query (?cpf=...) ou corpo JSON: { "cpf": "..." }.'
INVALID_JSON_DETAIL = 'JSON inválido. Envie { "cpf": "..." }.'
NON_STRING_CPF_DETAIL = "O campo cpf deve ser uma string."
INVALID_CPF_DETAIL = "CPF inválido."


class CpfValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("cpf_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def _cpf_from_body(self, body: bytes) -> Optional[str]:
        """
        Lê o campo cpf de um corpo JSON { "cpf": "..." }.
        Parâmetros:
            body (bytes): corpo bruto da requisição
        Retorno:
            str ou None: CPF informado, ou None se o campo não existir
        """
        try:
            data = json.loads(body)
        except (ValueError, RecursionError):
            self.logger.warning("Corpo da requisição não é um JSON válido")
            raise HTTPException(status_code=400, detail=INVALID_JSON_DETAIL)
        if not isinstance(data, dict):
            self.logger.warning(f"JSON recebido não é um objeto: tipo={type(data).__name__}")
            raise HTTPException(status_code=400, detail=INVALID_JSON_DETAIL)
        cpf = data.get("cpf")
        if cpf is not None and not isinstance(cpf, str):
            self.logger.warning(f"Campo cpf com tipo inesperado: tipo={type(cpf).__name__}")
            raise HTTPException(status_code=400, detail=NON_STRING_CPF_DETAIL)
        return cpf

    def extract_cpf(self, query_cpf: Optional[str], method: str, body: bytes = b"") -> str:
        """
        Obtém o CPF da query string ou, em POST sem query, do corpo JSON.
        Parâmetros:
            query_cpf (str, opcional): valor de ?cpf=
            method (str): método HTTP da requisição
            body (bytes): corpo bruto da requisição
        Retorno:
            str: CPF sem espaços nas pontas
        """
        cpf = query_cpf
        if (cpf is None or not cpf.strip()) and method.upper() == "POST" and body.strip():
            cpf = self._cpf_from_body(body)
        if cpf is None or not cpf.strip():
            self.logger.warning(f"CPF não informado: method={method}")
            raise HTTPException(status_code=400, detail=MISSING_CPF_DETAIL)
        return cpf.strip()

    def validate(self, cpf: str) -> Dict[str, Any]:
        """
        Valida o CPF e monta a resposta de sucesso.
        Parâmetros:
            cpf (str): CPF extraído da requisição
        Retorno:
            dict: cpf, status e mensagem
        """
        result = CPFUtils.check_cpf(cpf)
        if result is not CPFCheck.VALID:
            self.logger.info(f"CPF inválido: cpf={cpf}, motivo={result.value}")
            raise HTTPException(status_code=400, detail=INVALID_CPF_DETAIL)
        self.logger.info(f"CPF válido: cpf={cpf}")
        return {"cpf": cpf, "status": result.value, "message": f"CPF {cpf} é válido."}
