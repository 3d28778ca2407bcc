"""
rudder.client - Release service client.

One operation: install a chart.

    POST <host>/v1/releases:install
    {"chart": "nginx", "values": {"raw": "<base64>"}, "dryRun": false}

    200 {"release": {...}}   or   {"release": null}
    4xx/5xx {"error": {"code": "NotFound", "message": "..."}}
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Protocol

import httpx

from rudder.errors import ReleaseServiceError
from rudder.release import InstallRequest, InstallResponse, Release


_LOGGER = logging.getLogger(__name__)

INSTALL_PATH = "/v1/releases:install"


class Installer(Protocol):
    """Anything that can install a release."""

    def install_release(self, request: InstallRequest) -> InstallResponse:
        ...


def base_url(host: str) -> str:
    """Turn a host address into a base URL.

    >>> base_url(":44134")
    'http://localhost:44134'
    >>> base_url("https://tiller.example.com/")
    'https://tiller.example.com'
    """
    host = host.strip().rstrip("/")
    if host.startswith(":"):
        host = f"localhost{host}"
    if "://" not in host:
        host = f"http://{host}"
    return host


def encode_request(request: InstallRequest) -> dict[str, Any]:
    return {
        "chart": request.chart,
        "values": {"raw": base64.b64encode(request.values).decode("ascii")},
        "dryRun": request.dry_run,
    }


def decode_response(data: Any) -> InstallResponse:
    if not isinstance(data, dict):
        raise ReleaseServiceError("malformed response from release service")
    rel = data.get("release")
    if rel is None:
        return InstallResponse(release=None)
    try:
        release = Release.from_dict(rel)
    except (AttributeError, TypeError, ValueError, OverflowError) as e:
        raise ReleaseServiceError(
            "malformed response from release service"
        ) from e
    if not release.name:
        raise ReleaseServiceError("malformed response from release service")
    return InstallResponse(release=release)


class ReleaseClient:
    """HTTP client for the release service.

    No client-side timeout is set; the call blocks until the service
    answers or the transport fails.
    """

    def __init__(self, host: str, transport: httpx.BaseTransport | None = None):
        self.host = host
        self.base_url = base_url(host)
        self._transport = transport

    def install_release(self, request: InstallRequest) -> InstallResponse:
        url = f"{self.base_url}{INSTALL_PATH}"
        _LOGGER.debug(
            "Installing %s (dry_run=%s, %d bytes of values) via %s",
            request.chart, request.dry_run, len(request.values), url,
        )
        try:
            with httpx.Client(transport=self._transport, timeout=None) as client:
                resp = client.post(url, json=encode_request(request))
        except httpx.HTTPError as e:
            raise ReleaseServiceError(
                f"cannot reach release service at {self.host}: {e}",
                code="Unavailable",
            ) from e

        _LOGGER.debug("Release service answered %s", resp.status_code)
        if resp.is_error:
            raise _error_from_response(resp)

        try:
            data = resp.json()
        except ValueError as e:
            raise ReleaseServiceError(
                "malformed response from release service"
            ) from e
        return decode_response(data)


def _error_from_response(resp: httpx.Response) -> ReleaseServiceError:
    try:
        data = resp.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        err = data["error"]
        return ReleaseServiceError(
            str(err.get("message") or resp.reason_phrase),
            code=str(err.get("code") or resp.status_code),
        )

    text = resp.text.strip() or resp.reason_phrase
    return ReleaseServiceError(text, code=str(resp.status_code))
