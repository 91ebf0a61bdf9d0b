# aps/backends/demo.py
#
# Stand-in for hosts without flatpak (macOS, other distros): nothing is
# installed and every operation succeeds after a short pause.

import time

from rich.console import Console

from aps.backends.base import PackageManager
from aps.config import config

console = Console()


class DemoPackageManager(PackageManager):
    name = "demo"

    def __init__(self, delay: float | None = None):
        self.delay = config.demo_delay if delay is None else delay

    def list_installed(self) -> list[str]:
        return []

    def install(self, app_id: str) -> int:
        console.print(f"Demo: Installing {app_id}...", markup=False)
        time.sleep(self.delay)
        console.print(f"Successfully installed {app_id} (Demo)", markup=False)
        return 0

    def uninstall(self, app_id: str) -> int:
        console.print(f"Demo: Uninstalling {app_id}...", markup=False)
        time.sleep(self.delay)
        console.print(f"Successfully uninstalled {app_id} (Demo)", markup=False)
        return 0
