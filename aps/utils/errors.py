import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

from aps.exceptions import AppCenterError, FetchError

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def report(e: AppCenterError):
    err_console.print(f"[red]Error:[/red] {escape(str(e))}")
    if isinstance(e, FetchError) and e.raw is not None:
        err_console.print(e.raw, markup=False, highlight=False, emoji=False, soft_wrap=True)


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except AppCenterError as e:
            logger.debug("%s ▶ %s", func.__name__, e)
            report(e)
            sys.exit(1)
        except Exception as e:
            logger.error(f"{func.__name__} ▶ {e}")
            err_console.print(f"[red][!] {func.__name__} failed:[/red] {escape(str(e))}")
            sys.exit(1)

    return wrapper
