"""Exceções do fluxo de parcerias.

Cada ValidationError carrega a mensagem já traduzida que a página exibe.
"""


class ValidationError(Exception):
    default_message = "Erro ao criar parceria."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(ValidationError):
    default_message = "Preencha todos os campos obrigatórios."


class InvalidNumber(ValidationError):
    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} deve ser um número válido.")


class InvalidCnpjLength(ValidationError):
    default_message = "CNPJ da OSC deve conter 14 dígitos."


class OscNotFoundOrAmbiguous(ValidationError):
    default_message = "CNPJ da OSC não encontrado ou ambíguo."


class StoreNotFoundOrAmbiguous(ValidationError):
    default_message = "Código da Loja não encontrado ou ambíguo."


class CampaignNotFound(ValidationError):
    default_message = "ID da Campanha não encontrado."


class NetworkOrServerError(ValidationError):
    """Falha de transporte ou do servidor durante uma busca ou o envio."""


class MalformedRecord(ValueError):
    """Registro da API sem os objetos aninhados esperados (store/osc)."""


class SessionError(RuntimeError):
    """Transição inválida no ciclo de vida da sessão."""
