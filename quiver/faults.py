"""
Quiver faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
- CommandException / CommandWarning: base types that carry a message plus options and
  know how to render themselves with rich.
- CommandExit: exception group bundling several errors found in one pass.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Options understood by the renderers
- title, code, hint: header and footer copy (each fault class carries defaults).
- command: the Command involved, used for the program name in headers.
- shell: print instead of raising/warning (errors then exit with status 1).
- fancy: wrap the output in a panel.
- colorful: apply the palette (overridable through __styles__ in __main__).

Integration
- quiver.resolver.audit collects faults and calls trigger(fault, **ctx).
- Subcommands raise ExecutionError from Command.execute; quiver never inspects it.
"""
import copy
import os.path
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .logs import get_logger
from .utils import *

console = Console(stderr=True)
logger = get_logger("faults")


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - declaration errors (211xx): DUPLICATE_OPTION, SHADOWED_OPTION
    - delegated errors (2113x): EXECUTION_FAILED
    - warnings (22xxx): SHADOWED_OPTION_WARNING
    """
    # --- declaration errors (21xxx) ---
    DUPLICATE_OPTION            = 21101
    SHADOWED_OPTION             = 21102

    # --- delegated errors (21xxx) ---
    EXECUTION_FAILED            = 21131

    # --- warnings (22xxx) ---
    SHADOWED_OPTION_WARNING     = 22102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host can provide a __codes__ mapping in __main__ to relabel numeric ids.
        """
        return str(host("__codes__", {}).get(self, self.value))


def _program(options):
    if (prog := host("__prog__", Unset)) is not Unset:
        return prog
    if (command := options.get("command")) is not None:
        return str(command.name)
    return os.path.basename(sys.argv[0]) or "quiver"


class _Fault:
    """
    shared state and rendering for errors and warnings.
    """
    __title__ = "fault"
    __fault__ = Unset
    __palette__ = {}

    def __init__(self, message="", /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({
            "title": type(self).__title__,
            "code": type(self).__fault__,
            "hint": "",
            "shell": False,
            "fancy": False,
            "colorful": False,
        } | options)

    @property
    def code(self):
        return self.options["code"]

    def __rich__(self):
        styles = defaultdict(str, type(self).__palette__ | host("__styles__", {}))
        colorful = self.options["colorful"]

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        code = self.options["code"]
        header = Text.assemble(
            "[ ",
            text(_program(self.options), "prog-name"),
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "", "code"),
            " | ",
            text(self.options["title"].title(), "title"),
            " ]"
        )
        message = text(self.message, "message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options["hint"], "hint"))

        if self.options["fancy"]:
            return Panel(Group(message, hint), title=header, title_align="left")
        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class CommandException(_Fault, Exception):
    __title__ = "command error"
    __palette__ = {
        "prog-name": "bold #E6E6F0",
        "code": "bold #00E5FF",
        "title": "bold #FF4DA6",
        "message": "#C8C8D0",
        "hint-arrow": "#9CE19C dim",
        "hint": "italic #9CE19C",
    }

    def __trigger__(self):
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        sys.exit(1)


class ExecutionError(CommandException):
    """
    raised by Command.execute when the subcommand's operation cannot complete.
    """
    __title__ = "execution failed"
    __fault__ = FaultCode.EXECUTION_FAILED


class DuplicateOptionError(CommandException):
    __title__ = "duplicate option"
    __fault__ = FaultCode.DUPLICATE_OPTION


class ShadowedOptionError(CommandException):
    __title__ = "shadowed option"
    __fault__ = FaultCode.SHADOWED_OPTION


class CommandWarning(_Fault, Warning):
    __title__ = "command warning"
    __palette__ = {
        "prog-name": "bold #E6E6F0",
        "code": "bold #FFB400",
        "title": "bold #FFC2E0",
        "message": "#D6D6DE",
        "hint-arrow": "#B8EFAF dim",
        "hint": "italic #B8EFAF",
    }

    def __trigger__(self):
        if not self.options["shell"]:
            return warnings.warn(self, stacklevel=3)
        console.print(self)


class ShadowedOptionWarning(CommandWarning):
    __title__ = "shadowed option"
    __fault__ = FaultCode.SHADOWED_OPTION_WARNING


class CommandExit(ExceptionGroup):
    """
    several errors surfaced together.
    """

    def __new__(cls, exceptions, /, **options):
        return super().__new__(cls, "bad exit", tuple(exceptions))

    def __init__(self, exceptions, /, **options):
        super().__init__("bad exit", tuple(exceptions))
        self.options = MappingProxyType({"shell": False, "fancy": False, "colorful": False} | options)

    def __rich__(self):
        styles = defaultdict(str, {"prog-name": "bold #E6E6F0", "title": "bold #FF4DA6"} | host("__styles__", {}))
        colorful = self.options["colorful"]
        header = Text.assemble(
            "[ ",
            Text(_program(self.options), styles["prog-name"] if colorful else ""),
            " — ",
            Text(self.message.title(), styles["title"] if colorful else ""),
            " ]"
        )
        renders = [copy.replace(exception, fancy=False, colorful=colorful) for exception in self.exceptions]
        if self.options["fancy"]:
            return Panel(Group(*renders), title=header, title_align="left")
        return Group(header, *renders)

    def __trigger__(self):
        if not self.options["shell"]:
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.exceptions, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace before triggering.
    - in shell mode, rendering happens via the rich console; otherwise errors are raised
      and warnings are emitted through the warnings module.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault = copy.replace(fault, **options)
    logger.debug("triggering %s: %s", type(fault).__name__, fault)
    return fault.__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code, through __docs__ in __main__.

    returns None when the host documents nothing for this code.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return host("__docs__", {}).get(code)


__all__ = (
    "FaultCode",
    "CommandException",
    "ExecutionError",
    "DuplicateOptionError",
    "ShadowedOptionError",
    "CommandWarning",
    "ShadowedOptionWarning",
    "CommandExit",
    "trigger",
    "getdoc",
)
