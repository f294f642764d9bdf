"""
Módulo utilitário para validação e normalização de CPF.
Funções puras: não guardam estado e nunca lançam exceção para entradas ruins.
"""
from enum import Enum
from typing import Any, List
import re

_ONLY_DIGITS = re.compile(r"[0-9]{11}")


class CPFCheck(str, Enum):
    VALID = "valido"
    EMPTY = "vazio"
    MALFORMED = "formato_invalido"
    CHECK_DIGIT_MISMATCH = "digito_verificador_invalido"


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove todos os '.' e '-' do CPF e apara espaços nas pontas.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF sem pontuação ("" se cpf não for str)
        Exemplo: ' 111.444.777-35 ' -> '11144477735'
        """
        if not isinstance(cpf, str):
            return ""
        return cpf.replace(".", "").replace("-", "").strip()

    @staticmethod
    def _check_digit(digits: List[int], count: int) -> int:
        # Pesos decrescentes de (count + 1) até 2
        soma = sum((count + 1 - i) * digits[i] for i in range(count))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @staticmethod
    def check_cpf(cpf: Any) -> CPFCheck:
        """
        Classifica o CPF: válido, vazio, mal formado ou com dígito verificador errado.
        Parâmetros:
            cpf: valor candidato (normalmente str; qualquer outro tipo é tratado como vazio)
        Retorno:
            CPFCheck: resultado detalhado da validação
        """
        if not isinstance(cpf, str) or not cpf.strip():
            return CPFCheck.EMPTY

        cpf = CPFUtils.normalize_cpf(cpf)
        if not _ONLY_DIGITS.fullmatch(cpf):
            return CPFCheck.MALFORMED

        digits = [int(c) for c in cpf]
        # Primeiro dígito antes do segundo
        if digits[9] != CPFUtils._check_digit(digits, 9):
            return CPFCheck.CHECK_DIGIT_MISMATCH
        if digits[10] != CPFUtils._check_digit(digits, 10):
            return CPFCheck.CHECK_DIGIT_MISMATCH
        return CPFCheck.VALID

    @staticmethod
    def is_valid_cpf(cpf: Any) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Sequências repetidas (ex.: '00000000000') não são tratadas à parte.
        Parâmetros:
            cpf (str): CPF com ou sem '.' e '-'
        Retorno:
            bool: True se válido, False caso contrário
        """
        return CPFUtils.check_cpf(cpf) is CPFCheck.VALID
