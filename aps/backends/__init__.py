import shutil
import logging

from aps.backends.base import PackageManager
from aps.backends.demo import DemoPackageManager
from aps.backends.flatpak import FlatpakPackageManager
from aps.utils.osdetect import get_os

logger = logging.getLogger(__name__)


def has_flatpak() -> bool:
    return shutil.which("flatpak") is not None


def get_package_manager(require_linux: bool = True, remote: str | None = None) -> PackageManager:
    """
    flatpak when it is on PATH (and, for install/uninstall, the host is
    Linux); the demo backend otherwise.
    """
    os_name = get_os()
    if has_flatpak() and (os_name == "linux" or not require_linux):
        logger.debug("Using flatpak backend on %s", os_name)
        return FlatpakPackageManager(remote=remote)
    logger.debug("flatpak unavailable on %s, using demo backend", os_name)
    return DemoPackageManager()
