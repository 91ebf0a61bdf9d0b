# aps/backends/flatpak.py

import subprocess
import logging

from rich.console import Console

from aps.backends.base import PackageManager
from aps.config import config

logger = logging.getLogger(__name__)
console = Console()


class FlatpakPackageManager(PackageManager):
    name = "flatpak"

    def __init__(self, remote: str | None = None, executable: str = "flatpak"):
        self.remote = remote or config.remote
        self.executable = executable

    def list_installed(self) -> list[str]:
        """
        Application IDs from `flatpak list --app --columns=application`.
        A failing listing is reported as nothing installed.
        """
        cmd = [self.executable, "list", "--app", "--columns=application"]
        try:
            out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL, text=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("Flatpak list failed %s → %s", cmd, e)
            return []
        return [line.strip() for line in out.splitlines() if line.strip()]

    def install(self, app_id: str) -> int:
        """
        flatpak install -y <remote> <app-id>
        """
        cmd = [self.executable, "install", "-y", self.remote, app_id]
        console.print(f"Installing {app_id}...", markup=False)
        logger.debug("Running %s", cmd)
        return subprocess.call(cmd)

    def uninstall(self, app_id: str) -> int:
        """
        flatpak uninstall -y <app-id>
        """
        cmd = [self.executable, "uninstall", "-y", app_id]
        console.print(f"Uninstalling {app_id}...", markup=False)
        logger.debug("Running %s", cmd)
        return subprocess.call(cmd)
