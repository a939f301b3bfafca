"""``rich_click`` with the defaults every ``sexpand`` command shares.

Pattern and template errors are reported as ``Error: <message>`` with exit
status 1. Anything else reaches :func:`excepthook`.
"""

import functools
import sys
import traceback

import ipdb
import rich_click
from rich.console import Console
from rich.traceback import Traceback

from sexpand.errors import SexpandError
from sexpand.utils.config import SETTINGS


def excepthook(type, value, tb):
    if issubclass(type, KeyboardInterrupt):
        sys.__excepthook__(type, value, tb)
        return
    if SETTINGS.rich_traceback:
        Console(stderr=True).print(Traceback.from_exception(type, value, tb))
    else:
        traceback.print_exception(type, value, tb)
    if SETTINGS.debug:
        ipdb.post_mortem(tb)


def _report_errors(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except SexpandError as e:
            Console(stderr=True).print(
                f"Error: {e}",
                style="red",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            sys.exit(1)

    return wrapper


def command(*args, **kwargs):
    context_settings = kwargs.setdefault("context_settings", {})
    context_settings.setdefault("show_default", True)

    def decorator(f):
        sys.excepthook = excepthook
        return rich_click.command(*args, **kwargs)(_report_errors(f))

    return decorator


def __getattr__(name):
    return getattr(rich_click, name)
