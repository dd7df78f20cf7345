"""
Flagpole context: the invocation arguments plus the arguments you registered.

What this module provides
- Context: owns the program path, the raw argument table, the registry and the
  custom usage fragment, and answers presence/value queries.
- parse(argv): the explicit initialization call; build the Context once at
  startup, register arguments, then query.

Quick start
    import flagpole

    context = flagpole.parse(shell=True)  # sys.argv by default
    context.usage = "<file>"
    context.register("output", "o", descr="where to write", default="out.txt", expects=True)
    context.register("verbose", "v", descr="chatty output")

    if context.using("help"):
        context.print_usage()
    output = context.value("output")

Resolution
- using(name) / value(name) look the name up in the raw table first, then fall
  back to the shorthand of the registered argument with that name.
- An empty raw table answers False / "" without looking at the registry.
- value() cannot tell "absent" from "present without a value"; use using().

Faults
- Registration and usage faults go through Context.trigger: raised in library
  mode (shell=False), printed to stderr followed by exit status 1 in shell mode.
"""
import shlex
import sys
from collections.abc import Iterable
from types import MappingProxyType

from .arguments import Argument
from .faults import *
from .registry import Registry
from .tokens import tokenize
from .utils import *


class Context:
    """
    Explicit replacement for process-wide argument state.

    Parameters
    - program: str
      Program path, shown in the usage banner.
    - table: Mapping[str, str]
      Raw argument table, usually produced by tokenize().
    - usage: str
      Custom usage fragment printed between the program and the flag summary.
    - shell: bool
      When True, faults are printed and the process exits; otherwise raised.
    - colorful: bool
      Colorize fault reports in shell mode.
    """

    __introspectable__ = (
        "program",
        "usage",
        "table",
        "registry",
        "shell",
        "colorful",
    )

    def __init__(self, program, table, /, usage="", *, shell=False, colorful=False):
        if not isinstance(program, str):
            raise TypeError("context 'program' must be a string")
        if not isinstance(usage, str):
            raise TypeError("context 'usage' must be a string")
        self._program = program
        self._table = MappingProxyType(dict(table))
        self._registry = Registry()
        self.usage = usage
        self.shell = bool(shell)
        self.colorful = bool(colorful)

    program = mirror("program")
    table = mirror("table")
    registry = mirror("registry")

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return "context(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def trigger(self, fault, /, **options):
        """
        Surface a fault with this context's runtime options merged in.
        """
        trigger(fault, **options, prog=self._program, shell=self.shell, colorful=self.colorful)

    def register(self, argument=Unset, /, *args, **kwargs):
        """
        Register an Argument and return it.

        Accepts either a ready Argument or the parameters of one:
            context.register(Argument("output", "o", expects=True))
            context.register("output", "o", expects=True)

        Malformed parameters raise TypeError/ValueError in library mode and are
        reported as InvalidArgumentError in shell mode.
        """
        try:
            if not isinstance(argument, Argument):
                argument = Argument(argument, *args, **kwargs)
            elif args or kwargs:
                raise TypeError("register() takes no extra arguments when given an argument")
        except (TypeError, ValueError) as error:
            if not self.shell:
                raise
            return self.trigger(InvalidArgumentError(
                str(error),
                title="invalid argument",
                code=FaultCode.INVALID_ARGUMENT,
                hint="check the parameters passed to register()",
            ))

        try:
            return self._registry.register(argument)
        except ArgumentException as fault:
            self.trigger(fault)

    def using(self, name, /):
        """
        Return whether the argument was passed, by long name or shorthand.
        """
        if len(self._table) == 0:
            return False

        if name in self._table:
            return True
        argument = self._registry.find(name)
        return argument is not None and argument.short is not None and argument.short in self._table

    def value(self, name, /):
        """
        Return the value passed with the argument, by long name or shorthand.

        Returns "" when the argument is absent or was passed without a value.
        """
        if len(self._table) == 0:
            return ""

        if name in self._table:
            return self._table[name]
        argument = self._registry.find(name)
        if argument is not None and argument.short is not None:
            return self._table.get(argument.short, "")
        return ""

    def available_flags(self):
        return self._registry.available_flags()

    def format_usage(self):
        return self._registry.format_usage(self._program, self.usage)

    def print_usage(self, file=Unset, /):
        """
        Write the usage banner to stderr (or the given text stream) in one write.

        A stream that cannot be written triggers UsageWriteError.
        """
        file = coalesce(file, sys.stderr)
        banner = self.format_usage()
        try:
            file.write(banner)
            file.flush()
        except (OSError, ValueError) as error:
            self.trigger(UsageWriteError(
                "unable to write usage to %s: %s" % (getattr(file, "name", "stream"), error),
                title="usage write failure",
                code=FaultCode.USAGE_WRITE_FAILURE,
                hint="make sure the standard error stream is open and writable",
            ))


def parse(argv=Unset, /, **options):
    """
    Build a Context from the invocation argument list.

    Parameters
    - argv:
      • Unset: read sys.argv.
      • str: shell-like string; split via shlex.split.
      • Iterable[str]: the argument list.
      In every form the first item is the program path and is not tokenized.
    - **options: forwarded to Context (usage, shell, colorful).

    Raises
    - TypeError: when argv is not Unset/str/Iterable[str].
    """
    if argv is Unset:
        argv = list(sys.argv)
    elif isinstance(argv, str):
        argv = shlex.split(argv)
    elif isinstance(argv, Iterable):
        argv = list(argv)
    else:
        raise TypeError("parse() argument must be a string or an iterable of strings")

    if argv and not isinstance(argv[0], str):
        raise TypeError("parse() argument must be a string or an iterable of strings")

    program = argv[0] if argv else ""
    return Context(program, tokenize(argv[1:]), **options)


__all__ = (
    "Context",
    "parse",
)
