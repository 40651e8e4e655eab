"""Configuração centralizada de logging.

Uso:
    from core.logging_config import configure_logging

    configure_logging(level="INFO")  # uma vez, no app.py

Nos módulos basta ``logger = logging.getLogger(__name__)``.
"""

import logging

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Streamlit reexecuta o app.py a cada interação; evita handlers duplicados
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
