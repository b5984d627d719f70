"""
Grid master session management module.

This module wraps a ``requests`` session authenticated against the grid
master's WAPI endpoint. It only carries the session; object semantics are
left to the grid master.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
import urllib3

from ..exceptions import SessionError

logger = logging.getLogger(__name__)


def _error_detail(response: requests.Response) -> str:
    """Pull the most useful error text out of a WAPI error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or (response.reason or "")
    if isinstance(body, dict):
        return body.get("text") or body.get("Error") or str(body)
    return str(body)


class GridSession:
    """Authenticated session against an Infoblox grid master."""

    def __init__(
        self,
        grid_master: str,
        username: str,
        password: str,
        wapi_version: str = "v2.12",
        verify_ssl: bool = False,
        timeout: int = 10,
        http: Optional[requests.Session] = None,
    ):
        self.grid_master = grid_master
        self.wapi_version = wapi_version
        self.timeout = timeout
        self.http = http or requests.Session()
        self.http.auth = (username, password)
        self.http.verify = verify_ssl

        if not verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @property
    def base_url(self) -> str:
        return f"https://{self.grid_master}/wapi/{self.wapi_version}/"

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = self.base_url + path
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.http.request(method, url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SessionError(None, f"Unable to reach {self.grid_master}: {e}") from e

        if not response.ok:
            raise SessionError(response.status_code, _error_detail(response))
        return response.json()

    def connect(self) -> "GridSession":
        """Verify the credentials by reading the grid object."""
        self._request("GET", "grid")
        logger.info(f"Session established with {self.grid_master}")
        return self

    def get(
        self,
        object_type: str,
        return_fields: Optional[List[str]] = None,
        **filters: Any,
    ) -> List[Dict[str, Any]]:
        """
        Search for objects of a type.

        Args:
            object_type: WAPI object type, e.g. "fixedaddress"
            return_fields: Extra fields to include in each result
            **filters: Search filters, e.g. ipv4addr="192.168.1.97"

        Returns:
            List of matching objects
        """
        params = {name: value for name, value in filters.items() if value is not None}
        if return_fields:
            params["_return_fields+"] = ",".join(return_fields)
        result = self._request("GET", object_type, params=params)
        return result if isinstance(result, list) else [result]

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "GridSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_session(config, http: Optional[requests.Session] = None) -> GridSession:
    """
    Create a session to the configured grid master and verify it.

    Args:
        config: Loaded ConfigSchema
        http: Optional requests session to use

    Returns:
        Connected GridSession

    Raises:
        SessionError: If the grid master rejects the session or is unreachable
    """
    session = GridSession(
        grid_master=config.grid_master,
        username=config.username,
        password=config.password,
        wapi_version=config.wapi_version,
        verify_ssl=config.verify_ssl,
        timeout=config.timeout,
        http=http,
    )
    try:
        return session.connect()
    except SessionError:
        session.close()
        raise
