"""
rudder.install - Install a chart through the release service.

    check_args_length → load_values → install_release → print_release

Each step raises a RudderError subclass; the first failure ends the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from rudder.client import Installer
from rudder.errors import FileReadError, InvalidArgumentCount, ServiceError
from rudder.release import InstallRequest, InstallResponse
from rudder.render import print_release


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallOptions:
    """Settings for one install invocation."""
    chart: str
    values_file: str = ""
    dry_run: bool = False
    verbose: bool = False


def check_args_length(expected: int, args: Sequence[str], *required: str) -> None:
    if len(args) != expected:
        raise InvalidArgumentCount(expected, len(args), list(required))


def load_values(path: str | None) -> bytes:
    """Read the raw values payload.

    No path means no values: an empty payload, not an error. The file
    content is returned as-is; parsing it is the service's job.
    """
    if not path:
        return b""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileReadError(path, e) from e
    _LOGGER.debug("Read %d bytes of values from %s", len(data), path)
    return data


def install_release(installer: Installer, request: InstallRequest) -> InstallResponse:
    """Make the install call. Any failure becomes a ServiceError."""
    try:
        return installer.install_release(request)
    except Exception as e:
        _LOGGER.debug("Install of %s failed: %r", request.chart, e)
        raise ServiceError(e) from e


def run_install(
    options: InstallOptions,
    installer: Installer,
    echo: Callable[[str], None] | None = None,
) -> InstallResponse:
    """Load values, install, and print the resulting release."""
    values = load_values(options.values_file)
    request = InstallRequest(
        chart=options.chart,
        values=values,
        dry_run=options.dry_run,
    )
    resp = install_release(installer, request)
    print_release(resp.release, verbose=options.verbose, echo=echo)
    return resp
