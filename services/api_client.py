"""Cliente REST fino usado por todos os serviços.

Desembrulha o envelope ``{success, data, message}`` e converte qualquer
falha em ApiError.
"""

import logging
from typing import Any, Dict, Optional

import requests

from core.config import Settings, get_settings
from core.session import AdminSession

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """status_code None = falha de transporte (timeout, conexão recusada...)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None

    @property
    def is_server_error(self) -> bool:
        return self.status_code is None or self.status_code >= 500

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {resp.status_code}"


class ApiClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[AdminSession] = None,
                 http: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or AdminSession()
        self.http = http or requests.Session()

    def _url(self, endpoint: str) -> str:
        return f"{self.settings.api_base_url}/{endpoint.lstrip('/')}"

    def request(self, method: str, endpoint: str, params: Optional[Dict[str, Any]] = None,
                json: Optional[Dict[str, Any]] = None) -> Any:
        url = self._url(endpoint)
        headers = {"Accept": "application/json", **self.session.auth_headers()}
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug("%s %s", method, url)
        try:
            resp = self.http.request(method, url, params=params or None, json=json,
                                     headers=headers, timeout=self.settings.api_timeout)
        except requests.RequestException as e:
            logger.warning("Falha de conexão em %s %s: %s", method, url, e)
            raise ApiError(f"Falha de conexão com a API: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            message = _error_message(resp)
            logger.warning("HTTP %s em %s %s: %s", resp.status_code, method, url, message)
            raise ApiError(message, resp.status_code) from e

        if not resp.content:
            return None
        try:
            body = resp.json()
        except ValueError as e:
            raise ApiError("Resposta inválida da API (JSON esperado)", resp.status_code) from e

        if isinstance(body, dict) and "success" in body:
            if not body.get("success"):
                raise ApiError(body.get("message") or "Requisição recusada pela API", resp.status_code)
            return body.get("data")
        return body

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        return self.request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Dict[str, Any]) -> Any:
        return self.request("PUT", endpoint, json=data)
