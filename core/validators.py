import math
import re
from typing import Union

from core.errors import InvalidNumber

CNPJ_LENGTH = 14
_NON_DIGITS = re.compile(r"\D")
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def unformat_cnpj(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def format_cnpj(value: str) -> str:
    """Aplica a máscara XX.XXX.XXX/XXXX-XX conforme o usuário digita."""
    d = unformat_cnpj(value)
    if len(d) <= 2:
        return d
    if len(d) <= 5:
        return f"{d[:2]}.{d[2:]}"
    if len(d) <= 8:
        return f"{d[:2]}.{d[2:5]}.{d[5:]}"
    if len(d) <= 12:
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:]}"
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:14]}"


def has_cnpj_length(value: str) -> bool:
    return len(unformat_cnpj(value)) == CNPJ_LENGTH


def parse_number_field(value: str, field: str) -> Union[int, float]:
    """Converte o texto do formulário em número.

    Aceita espaços nas pontas, sinal, fração e expoente ('42', '4.5', '4.2e1').
    Rejeita texto, '_' como separador, NaN e infinito. Valores inteiros
    voltam como int para irem limpos na query string.
    """
    text = str(value).strip()
    if not _NUMBER.fullmatch(text):
        raise InvalidNumber(field)
    number = float(text)
    if not math.isfinite(number):
        raise InvalidNumber(field)
    return int(number) if number.is_integer() else number
