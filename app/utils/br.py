# app/utils/br.py
import re


def only_digits(s: str | None) -> str:
    return re.sub(r"\D+", "", s or "")


def normalize_cpf_cnpj(value: str | None) -> str | None:
    digits = only_digits(value)
    if len(digits) in (11, 14):
        return digits
    return None  # deixa None se vier inválido/ausente


def normalize_mobile_phone(value: str | None) -> str | None:
    # Asaas aceita strings como "11987654321" (DDI opcional); vamos enviar só dígitos
    digits = only_digits(value)
    return digits or None


_MILHAR = re.compile(r"^-?[1-9]\d{0,2}(\.\d{3})+$")
_MILHAR_COM_CENTAVOS = re.compile(r"^-?\d{1,3}(\.\d{3})*,\d+$")


def parse_valor(v) -> float:
    """
    Converte número ou texto em reais para float com 2 casas.
    Aceita 50, "50", "50.5", "50,50", "1.234", "1.234,56", "R$ 1.234,56".
    Ponto só com grupos de 3 dígitos é separador de milhar; o resto ambíguo é rejeitado.
    """
    if v is None or isinstance(v, bool):
        raise ValueError("valor é obrigatório")
    if isinstance(v, (int, float)):
        f = float(v)
    else:
        s = re.sub(r"[^\d,\.\-]", "", str(v))
        if not s or not re.search(r"\d", s):
            raise ValueError("valor inválido")
        if "," in s:
            if "." in s and not _MILHAR_COM_CENTAVOS.match(s):
                raise ValueError("valor inválido")
            s = s.replace(".", "").replace(",", ".")
        elif _MILHAR.match(s):
            s = s.replace(".", "")
        elif s.count(".") > 1:
            raise ValueError("valor inválido")
        f = float(s)
    if f != f or f in (float("inf"), float("-inf")):
        raise ValueError("valor inválido")
    return round(f, 2)
