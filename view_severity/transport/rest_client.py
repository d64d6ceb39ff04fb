from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, TypeVar

import requests

from view_severity.domain.models import Alarm, View
from view_severity.transport.client_config import ALARMS_PATH, TIMEOUT_S, VIEWS_PATH
from view_severity.transport.codec import decode_alarms, decode_views

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RestClientConfig:
    """
    Configuration for the HTTP query client.

    Parameters
    ----------
    base_url
        Base URL of the management system API (e.g. "http://host:8000/api").
    alarms_path
        Path of the active-alarms endpoint, relative to ``base_url``.
    views_path
        Path of the views endpoint, relative to ``base_url``.
    timeout_s
        HTTP request timeout in seconds.
    verify_tls
        Whether to verify TLS certificates.
    auth_header
        Optional Authorization header value (e.g., Bearer token).
    """

    base_url: str
    alarms_path: str = ALARMS_PATH
    views_path: str = VIEWS_PATH
    timeout_s: float = TIMEOUT_S
    verify_tls: bool = True
    auth_header: Optional[str] = None


class RestQueryClient:
    """
    Query client that reads alarms and views from the management system
    over HTTP.

    Notes
    -----
    - This class performs side effects (network I/O).
    - Failures are not raised: transport errors, HTTP error statuses and
      unusable bodies are logged and reported as None, which the aggregator
      turns into a fetch failure for the current cycle.
    """

    def __init__(self, cfg: RestClientConfig):
        """
        Initialize the query client.

        Parameters
        ----------
        cfg
            Client configuration.
        """
        self._cfg = cfg

    def _url(self, path: str) -> str:
        return self._cfg.base_url.rstrip("/") + "/" + path.lstrip("/")

    def _get(self, path: str, decode: Callable[[Any], Optional[T]]) -> Optional[T]:
        url = self._url(path)
        headers = {"Accept": "application/json"}
        if self._cfg.auth_header:
            headers["Authorization"] = self._cfg.auth_header

        try:
            r = requests.get(
                url,
                headers=headers,
                timeout=self._cfg.timeout_s,
                verify=self._cfg.verify_tls,
            )
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            logger.warning("GET %s failed: %r", url, e)
            return None
        except ValueError as e:
            logger.warning("GET %s returned invalid JSON: %r", url, e)
            return None

        try:
            result = decode(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("GET %s returned an undecodable body: %r", url, e)
            return None
        if result is None:
            logger.warning("GET %s returned no usable collection", url)
        return result

    def fetch_active_alarms(self) -> Optional[List[Alarm]]:
        """
        Return all currently active alarms.

        Returns
        -------
        list of Alarm or None
            Decoded alarms, or None if the query failed.
        """
        return self._get(self._cfg.alarms_path, decode_alarms)

    def fetch_views(self) -> Optional[List[View]]:
        """
        Return all views known to the management system.

        Returns
        -------
        list of View or None
            Decoded views, or None if the query failed.
        """
        return self._get(self._cfg.views_path, decode_views)
