# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .distance import InvalidWordError
from .pretty import TableLayout
from .sources import SourceError
from argparse import Action, Namespace
from os import PathLike
from spellit import envdefault, pretty
from typing import Any, Callable, Collection, Mapping, NoReturn, Sequence, TextIO, TYPE_CHECKING, TypeVar

import argparse
import csv as csvlib
import errno
import functools
import json as jsonlib
import logging
import requests.exceptions
import sys

# Optional shell completions
try:
    import argcomplete  # type: ignore

    ARGCOMPLETE_INSTALLED = True
except ImportError:
    ARGCOMPLETE_INSTALLED = False

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

SKIP_EVALUATION_TYPES = (property, functools.cached_property)
ARG_LIST_PROP = "_arg_list"
LOG_FORMAT = "%(levelname)s\t%(message)s"


class CustomFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter to display the default value only for integers and non-empty strings"""

    def _get_help_string(self, action: Action) -> str:
        help_text = action.help or ""
        if "%(default)" not in help_text and action.default is not argparse.SUPPRESS:
            if action.option_strings or action.nargs in [argparse.OPTIONAL, argparse.ZERO_OR_MORE]:
                if (not isinstance(action.default, bool) and isinstance(action.default, int)) or (
                    isinstance(action.default, str) and action.default
                ):
                    help_text += " (default: %(default)s)"
        return help_text


class UserError(Exception):
    """User error"""


F = TypeVar("F", bound=Callable)


class Arg:
    """Decorator adding an `add_argument` call to a command method

    A method carrying at least one @arg, even an empty `@arg()`, is a command.
    Arguments are added in the order the decorators are written.

    Example usage::

        class CLI(CommandLineTool):

            @arg("word", nargs="+")
            def correct(self):
                print(self.args.word)
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Callable[[F], F]:
        def wrap(func: F) -> F:
            arg_list = getattr(func, ARG_LIST_PROP, None)
            if arg_list is None:
                arg_list = []
                setattr(func, ARG_LIST_PROP, arg_list)

            if args or kwargs:
                arg_list.insert(0, (args, kwargs))

            return func

        return wrap

    if TYPE_CHECKING:

        def __getattr__(self, name: str) -> Callable:
            ...

        def __setattr__(self, name: str, value: Callable) -> None:
            ...


arg = Arg()


def name_to_cmd_parts(name: str) -> list[str]:
    """`corpus__corrections` -> ["corpus", "corrections"]"""
    if "__" in name:
        cmd_parts = name.split("__")
    else:
        cmd_parts = name.split("_", 1)

    return [part.replace("_", "-") for part in cmd_parts]


class Config(dict):
    """Settings loaded from a JSON file; a missing file means no settings"""

    def __init__(self, file_path: PathLike | str):
        dict.__init__(self)
        self.file_path = file_path
        self.load()

    def load(self) -> None:
        self.clear()
        try:
            with open(self.file_path, encoding="utf-8") as fp:
                data = jsonlib.load(fp)
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                return

            raise UserError(
                "Failed to load configuration file {!r}: {}: {}".format(self.file_path, ex.__class__.__name__, ex)
            ) from ex
        except ValueError as ex:
            raise UserError("Invalid JSON in configuration file {!r}".format(self.file_path)) from ex

        if not isinstance(data, dict):
            raise UserError("Configuration file {!r} must contain a JSON object".format(self.file_path))
        self.update(data)


# Errors reported as a one-line "command failed" message instead of a traceback
EXPECTED_ERRORS = (
    requests.exceptions.ConnectionError,
    UserError,
    SourceError,
    InvalidWordError,
)


class CommandLineTool:
    """Command tree built from the @arg-tagged methods of a subclass

    `corpus__corrections` becomes `spellit corpus corrections`; the parsed
    arguments are in `self.args` and the JSON config file in `self.config`.
    """

    config: Config

    def __init__(self, name: str, parser: argparse.ArgumentParser | None = None):
        self.log = logging.getLogger(name)
        self.parser = parser or argparse.ArgumentParser(prog=name, formatter_class=CustomFormatter)
        self.parser.add_argument(
            "--config",
            help="config file location %(default)r",
            default=envdefault.SPELLIT_CONFIG,
        )
        self.parser.add_argument("--version", action="version", version="spellit {}".format(__version__))
        self.subparsers = self.parser.add_subparsers(title="command categories", dest="command", help="", metavar="")
        self._groups: dict[str, argparse._SubParsersAction] = {}
        self.args: Namespace = Namespace()

    def _group_subparsers(self, group: str | None) -> argparse._SubParsersAction:
        if group is None:
            return self.subparsers
        if group not in self._groups:
            group_parser = self.subparsers.add_parser(
                group, help="{} commands".format(group.title()), formatter_class=CustomFormatter
            )
            self._groups[group] = group_parser.add_subparsers()
        return self._groups[group]

    def add_cmd(self, func: Callable) -> None:
        """Register `func` as a command, nested under its group if it has one"""
        assert func.__doc__, f"Missing docstring for {func.__qualname__}"

        *groups, cmd = name_to_cmd_parts(func.__name__)
        assert len(groups) <= 1, f"Commands nest one level deep: {func.__name__}"
        subparsers = self._group_subparsers(groups[0] if groups else None)
        parser = subparsers.add_parser(cmd, help=func.__doc__, description=func.__doc__, formatter_class=CustomFormatter)
        parser.set_defaults(func=func)
        for args, kwargs in getattr(func, ARG_LIST_PROP, []):
            parser.add_argument(*args, **kwargs)

        # help lists commands alphabetically, not in registration order
        self.subparsers._choices_actions.sort(key=lambda item: item.dest)

    def add_cmds(self, add_func: Callable[[Callable], None]) -> None:
        """Pass every method tagged with @arg to `add_func`"""
        for name in dir(self):
            # properties are not commands; looking them up would evaluate them
            if isinstance(getattr(type(self), name, None), SKIP_EVALUATION_TYPES):
                continue
            func = getattr(self, name, None)
            if callable(func) and hasattr(func, ARG_LIST_PROP):
                add_func(func)

    def parse_args(self, args: Sequence[str] | None = None) -> None:
        self.add_cmds(self.add_cmd)
        if ARGCOMPLETE_INSTALLED:
            argcomplete.autocomplete(self.parser)
        self.args = self.parser.parse_args(args=args)

    def print_rows(
        self,
        rows: Collection[Mapping[str, Any]],
        table_layout: TableLayout,
        file: TextIO | None = None,
    ) -> None:
        """Print `rows` as JSON, CSV or a table, as chosen with --json and --csv"""
        file = file or sys.stdout
        if getattr(self.args, "json", False):
            print(jsonlib.dumps(rows, indent=4, sort_keys=True, ensure_ascii=False), file=file)
        elif getattr(self.args, "csv", False):
            writer = csvlib.DictWriter(file, fieldnames=list(pretty.flatten_list(table_layout)), extrasaction="ignore")
            writer.writeheader()
            writer.writerows({key: pretty.format_item(key, value) for key, value in row.items()} for row in rows)
        else:
            pretty.print_table(rows, table_layout=table_layout, file=file)

    def run(self, args: Sequence[str] | None = None) -> int | None:
        args = args or sys.argv[1:] or ["--help"]
        self.parse_args(args=args)
        try:
            self.config = Config(self.args.config)
            func = getattr(self.args, "func", None)
            if func is None:
                # a command group without a command: show the group's help
                self.parser.parse_args(list(args) + ["--help"])
                return 1
            return func()
        except EXPECTED_ERRORS as ex:
            self.log.error("command failed: %s: %s", ex.__class__.__name__, ex)
            return 1
        except OSError as ex:
            if ex.errno != errno.EPIPE:
                raise
            self.log.error("*** output truncated ***")
            return 13  # SIGPIPE
        except KeyboardInterrupt:
            self.log.error("*** terminated by keyboard ***")
            return 2  # SIGINT

    def main(self, args: Sequence[str] | None = None) -> NoReturn:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logging.getLogger("requests").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        sys.exit(self.run(args))
