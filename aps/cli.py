# aps/cli.py
import sys
import logging
import argparse

from rich.console import Console
from rich.logging import RichHandler

from aps import __version__
from aps.api import FlathubClient
from aps.config import FLATHUB_API
from aps.appcenter import app_info, install, search, uninstall

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)

PROG = "aps"
APP_ACTIONS = ["info", "install", "uninstall"]

USAGE = "\n".join([
    "Usage:",
    f'  {PROG} --search "<query>" [page:<N>] [category:<C>]',
    f"  {PROG} app info <app_id>",
    f"  {PROG} app install <app_id>",
    f"  {PROG} app uninstall <app_id>",
])
APP_USAGE = f"Usage: {PROG} app {{{'|'.join(APP_ACTIONS)}}} <app_id>"


class RichParser(argparse.ArgumentParser):
    def __init__(self, *args, usage_text=USAGE, **kwargs):
        self.usage_text = usage_text
        super().__init__(*args, **kwargs)

    def error(self, message):
        logger.debug("argument error: %s", message)
        self.exit_usage()

    def exit_usage(self):
        err_console.print(self.usage_text, markup=False, highlight=False)
        sys.exit(1)


def build_parser():
    parser = RichParser(
        prog=PROG,
        description="App Center CLI: search Flathub and manage apps with flatpak",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--api-url", default=None, help="Flathub API base URL (default: %s)" % FLATHUB_API
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--search",
        nargs=argparse.REMAINDER,
        default=None,
        metavar="ARG",
        help='Search query plus optional page:<N> and category:<C>',
    )

    sub = parser.add_subparsers(dest="command")
    app = sub.add_parser("app", usage_text=APP_USAGE, help="App info, install, uninstall")
    app.add_argument("action", choices=APP_ACTIONS)
    app.add_argument("app_id", nargs="?", default="", help="Flatpak application ID")
    return parser


def setup_logging(verbose=False):
    root = logging.getLogger("aps")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.handlers[:] = [RichHandler(console=err_console, show_path=False)]


def main(argv=None):
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    setup_logging(args.verbose)
    if extra:
        logger.debug("ignoring extra arguments: %s", extra)

    client = FlathubClient(api_url=args.api_url)

    if args.search is not None:
        search(args.search, client=client)
    elif args.command == "app":
        act = args.action
        tgt = args.app_id
        if act == "info":
            app_info(tgt, client=client)
        elif act == "install":
            install(tgt)
        elif act == "uninstall":
            uninstall(tgt)
    else:
        parser.exit_usage()
    return 0


if __name__ == "__main__":
    sys.exit(main())
