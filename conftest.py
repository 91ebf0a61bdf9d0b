from unittest.mock import MagicMock

import pytest

from aps.backends.base import PackageManager


class FakeClient:
    """Stands in for FlathubClient; bodies are raw strings."""

    def __init__(self, appstream="", app="", search="[]"):
        self.bodies = {"appstream": appstream, "app": app, "search": search}
        self.calls = []

    def search(self, payload):
        self.calls.append(("search", payload))
        return self.bodies["search"]

    def appstream(self, app_id):
        self.calls.append(("appstream", app_id))
        return self.bodies["appstream"]

    def app(self, app_id):
        self.calls.append(("app", app_id))
        return self.bodies["app"]


class FakePackageManager(PackageManager):
    name = "fake"

    def __init__(self, installed=(), status=0):
        self.installed = list(installed)
        self.status = status
        self.calls = []

    def list_installed(self):
        return self.installed

    def install(self, app_id):
        self.calls.append(("install", app_id))
        return self.status

    def uninstall(self, app_id):
        self.calls.append(("uninstall", app_id))
        return self.status


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def fake_pm():
    return FakePackageManager


@pytest.fixture
def session():
    return MagicMock()
