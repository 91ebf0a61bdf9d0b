# aps/utils/deps.py
#
# Runs before anything imports rich or requests, so stdlib only.

import importlib.util
import sys

from aps.exceptions import MissingDependency

# role -> importable module
REQUIRED = {
    "http client": "requests",
    "json processor": "rich",
}


def ensure_deps():
    missing = [mod for mod in REQUIRED.values() if importlib.util.find_spec(mod) is None]
    if missing:
        raise MissingDependency(missing)


def check_deps():
    """
    Exit with status 1 if the HTTP client or the JSON processor is missing,
    one line per missing module on stderr.
    """
    try:
        ensure_deps()
    except MissingDependency as e:
        for name in e.missing:
            print(f"Error: {name} is not installed.", file=sys.stderr)
        print("Please install missing dependencies.", file=sys.stderr)
        sys.exit(1)
