"""
rudder - Chart installation CLI.

Installs charts through a remote release service.
"""

from rudder.client import Installer, ReleaseClient
from rudder.errors import (
    RudderError,
    InvalidArgumentCount,
    FileReadError,
    ServiceError,
    ReleaseServiceError,
    ConfigError,
)
from rudder.install import (
    InstallOptions,
    check_args_length,
    load_values,
    install_release,
    run_install,
)
from rudder.release import (
    Release,
    Info,
    Status,
    ChartMetadata,
    InstallRequest,
    InstallResponse,
)
from rudder.render import print_release

__version__ = "0.1.0"

__all__ = [
    # service
    "Installer",
    "ReleaseClient",
    # errors
    "RudderError",
    "InvalidArgumentCount",
    "FileReadError",
    "ServiceError",
    "ReleaseServiceError",
    "ConfigError",
    # install
    "InstallOptions",
    "check_args_length",
    "load_values",
    "install_release",
    "run_install",
    "print_release",
    # model
    "Release",
    "Info",
    "Status",
    "ChartMetadata",
    "InstallRequest",
    "InstallResponse",
]
