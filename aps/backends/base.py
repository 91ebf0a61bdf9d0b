from abc import ABC, abstractmethod


class PackageManager(ABC):
    name = ""

    @abstractmethod
    def list_installed(self) -> list[str]:
        pass

    @abstractmethod
    def install(self, app_id: str) -> int:
        pass

    @abstractmethod
    def uninstall(self, app_id: str) -> int:
        pass

    def is_installed(self, app_id: str) -> bool:
        # exact match only: "org.app" must not match "org.app.extra"
        return app_id in self.list_installed()
