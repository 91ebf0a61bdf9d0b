# aps/appcenter.py

import sys
import json
import logging
from typing import Any

from aps.api import FlathubClient
from aps.backends import PackageManager, get_package_manager
from aps.exceptions import FetchError, UsageError
from aps.search import build_payload, parse_search_args
from aps.utils.errors import handle_errors

logger = logging.getLogger(__name__)

_INVALID = object()


def _parse_json(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return _INVALID


def _require_app_id(app_id: str | None):
    if not app_id:
        raise UsageError("App ID is required.")


def merge_installed(record: Any, installed: bool, raw: str | None = None) -> dict:
    """
    Return `record` with `installed` set, replacing any key of that name.
    A JSON null merges like an empty object. `raw` is the body the record
    was parsed from, reported as-is when the record can't be merged.
    """
    if record is None:
        record = {}
    if not isinstance(record, dict):
        raise FetchError(
            "Failed to fetch app info or invalid response.",
            raw=raw,
        )
    merged = dict(record)
    merged["installed"] = installed
    return merged


@handle_errors
def search(args: list[str], client: FlathubClient | None = None):
    query = parse_search_args(args)
    client = client or FlathubClient()
    body = client.search(build_payload(query))
    # passthrough, exactly as received
    sys.stdout.write(body)
    sys.stdout.flush()


def fetch_app(app_id: str, client: FlathubClient) -> tuple[Any, str]:
    """
    Appstream metadata for app_id, or the /apps record when the appstream
    body isn't JSON. Any well-formed JSON counts, schema is not checked.
    Returns the parsed value and the body it came from.
    """
    body = client.appstream(app_id)
    data = _parse_json(body)
    if data is not _INVALID:
        return data, body

    logger.debug("appstream/%s returned invalid JSON, falling back to apps/%s", app_id, app_id)
    body = client.app(app_id)
    data = _parse_json(body)
    if data is not _INVALID:
        return data, body

    raise FetchError("Failed to fetch app info or invalid response.", raw=body)


@handle_errors
def app_info(app_id: str, client: FlathubClient | None = None,
             package_manager: PackageManager | None = None):
    _require_app_id(app_id)
    data, body = fetch_app(app_id, client or FlathubClient())

    # probing needs only flatpak itself, whatever the platform
    pm = package_manager or get_package_manager(require_linux=False)
    installed = pm.is_installed(app_id)
    logger.debug("%s installed=%s (%s backend)", app_id, installed, pm.name)

    print(json.dumps(merge_installed(data, installed, raw=body), indent=2, ensure_ascii=False))


@handle_errors
def install(app_id: str, package_manager: PackageManager | None = None):
    _require_app_id(app_id)
    pm = package_manager or get_package_manager()
    status = pm.install(app_id)
    if status:
        logger.debug("%s install %s exited with %s", pm.name, app_id, status)
        sys.exit(status)


@handle_errors
def uninstall(app_id: str, package_manager: PackageManager | None = None):
    _require_app_id(app_id)
    pm = package_manager or get_package_manager()
    status = pm.uninstall(app_id)
    if status:
        logger.debug("%s uninstall %s exited with %s", pm.name, app_id, status)
        sys.exit(status)
