"""Sessão explícita do painel.

A sessão é criada uma vez por navegador (st.session_state) e passada para o
ApiClient; nada aqui conversa com a rede.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from core.errors import SessionError

logger = logging.getLogger(__name__)


class SessionState:
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


@dataclass
class AdminSession:
    state: str = SessionState.ANONYMOUS
    token: Optional[str] = None
    user: Optional[str] = None
    failure_reason: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED

    def _move(self, new_state: str) -> None:
        logger.debug("session %s -> %s", self.state, new_state)
        self.state = new_state

    def begin(self) -> None:
        if self.state not in (SessionState.ANONYMOUS, SessionState.FAILED):
            raise SessionError(f"Não é possível autenticar a partir de '{self.state}'")
        self.failure_reason = None
        self._move(SessionState.AUTHENTICATING)

    def complete(self, token: str, user: Optional[str] = None) -> None:
        if self.state != SessionState.AUTHENTICATING:
            raise SessionError(f"Autenticação não iniciada (estado '{self.state}')")
        if not token:
            self.fail("Token vazio")
            return
        self.token = token
        self.user = user
        self._move(SessionState.AUTHENTICATED)

    def fail(self, reason: str) -> None:
        if self.state != SessionState.AUTHENTICATING:
            raise SessionError(f"Autenticação não iniciada (estado '{self.state}')")
        self.token = None
        self.failure_reason = reason
        logger.warning("Falha na autenticação: %s", reason)
        self._move(SessionState.FAILED)

    def logout(self) -> None:
        self.token = None
        self.user = None
        self.failure_reason = None
        self._move(SessionState.ANONYMOUS)

    def auth_headers(self) -> Dict[str, str]:
        if not self.is_authenticated or not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def session_from_token(token: Optional[str], user: Optional[str] = None) -> AdminSession:
    """Sessão já autenticada quando há token configurado (API_TOKEN)."""
    session = AdminSession()
    if token:
        session.begin()
        session.complete(token, user)
    return session
