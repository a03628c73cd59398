# src/dlmm_mcp/clients/base_client.py
import logging
from abc import ABC
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dlmm_mcp.clients.errors import DlmmHttpError

logger = logging.getLogger(__name__)


class BaseDLMMClient(ABC):
    """Shared HTTP plumbing for the Meteora REST API and the SDK bridge.

    Every call goes through one ``requests.Session``. ``timeout`` is applied
    to each request and ``max_retries`` is mounted as a urllib3 ``Retry``
    policy, which only replays idempotent methods.
    """

    def __init__(self, base_url: str, timeout: float = 30.0, max_retries: int = 3,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or self._build_session(max_retries)
        self.session.headers.update({
            'Content-type': 'application/json',
            'Accept': 'application/json',
        })

    @staticmethod
    def _build_session(max_retries: int) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=max(max_retries, 0),
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def _request(self, method: str, endpoint: str, json: Optional[Dict[str, Any]] = None,
                 headers: Optional[Dict[str, str]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=json, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise DlmmHttpError(f"Request to {url} failed: {e}", url=url) from e

        logger.debug("Status code: %s", response.status_code)
        if response.status_code >= 400:
            body = (response.text or "")[:512]
            raise DlmmHttpError(
                f"HTTP {response.status_code} from {url}: {body}",
                status_code=response.status_code,
                url=url,
            )
        try:
            return response.json()
        except ValueError as e:
            raise DlmmHttpError(f"Failed to parse JSON: {e}", status_code=response.status_code, url=url) from e

    def _get(self, endpoint: str) -> Any:
        return self._request("GET", endpoint)

    def _post(self, endpoint: str, payload: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> Any:
        return self._request("POST", endpoint, json=payload or {}, headers=headers)

    def close(self) -> None:
        self.session.close()
