"""
Flagpole faults (registration and output errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the package
  can surface. Codes are grouped by domain to keep logs/searches predictable.
- ArgumentException: base type that carries message + options and knows how to
  render itself in a short, lowercased, actionable way.
- trigger(): central entry point to surface any fault (respecting shell/colorful).

All faults are caller misconfiguration, not runtime data errors: registering the
same name twice, giving a default to an argument that takes no value, passing
malformed argument parameters, or losing the standard error stream while
printing usage.

Integration
- In library mode (shell=False) faults are raised so embedding code decides.
- In shell mode they are rendered to stderr via rich and the process exits.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - registration (2111x)
      • INVALID_DEFAULT, DUPLICATE_NAME, DUPLICATE_SHORTHAND, INVALID_ARGUMENT
    - output (2121x)
      • USAGE_WRITE_FAILURE
    """
    # --- registration errors (21xxx) ---
    INVALID_DEFAULT             = 21111
    DUPLICATE_NAME              = 21112
    DUPLICATE_SHORTHAND         = 21113
    INVALID_ARGUMENT            = 21114

    # --- output errors (21xxx) ---
    USAGE_WRITE_FAILURE         = 21211

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if self.message is not Unset else ""

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "flagpole")), styler("prog-name"))
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code else "?", styler("code")),
            " | ",
            text(self.options.get("title", "error").title(), styler("error-title")),
            " ]"
        )
        message = text(str(self), styler("error-message"))

        if not self.options.get("hint"):
            return Group(header, message)

        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint")))
        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateArgumentError(ArgumentException): ...
class InvalidDefaultError(ArgumentException): ...
class InvalidArgumentError(ArgumentException): ...
class UsageWriteError(ArgumentException): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console and the process exits;
      otherwise the fault is raised.

    typical options
    - prog, shell, colorful, title, code, hint, and any context the reporter
      may want to keep (e.g., argument).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "ArgumentException",
    "DuplicateArgumentError",
    "InvalidDefaultError",
    "InvalidArgumentError",
    "UsageWriteError",
    "FaultCode",
    "trigger",
)
