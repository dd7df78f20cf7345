r"""
Flagpole registry: the ordered set of known arguments.

What this module provides
- Registry: an append-only, registration-ordered collection of Argument
  descriptors with lookup by long name, registration rules and usage rendering.

Registration rules (checked in this order)
- a default requires expects=True                  → InvalidDefaultError
- the long name must not be registered already     → DuplicateArgumentError
- a shorthand must not be registered already       → DuplicateArgumentError

A rejected argument leaves the registry untouched.

Usage layout
    USAGE: <program> <usage> [<flags>]
    Options:
    \t -s= \t --name=      \t description [a, b] [default=a]

Tabs are part of the layout; long names are padded to the longest registered
name so the description column lines up.
"""
from .arguments import Argument
from .faults import *


class Registry:
    """
    Append-only collection of Argument descriptors.

    Iteration yields arguments in registration order; that order drives both
    the one-line flag summary and the per-argument usage lines.
    """

    def __init__(self):
        self._arguments = []

    def __iter__(self):
        return iter(self._arguments)

    def __len__(self):
        return len(self._arguments)

    def __repr__(self):
        return f"registry({", ".join(argument.name for argument in self._arguments)})"

    @property
    def arguments(self):
        return tuple(self._arguments)

    def find(self, name, /):
        """
        Return the registered Argument with the given long name, or None.
        """
        for argument in self._arguments:
            if argument.name == name:
                return argument
        return None

    def register(self, argument, /):
        """
        Append an Argument after checking the registration rules.

        Raises
        - TypeError: when argument is not an Argument.
        - InvalidDefaultError: default set on an argument that expects no value.
        - DuplicateArgumentError: name or shorthand already registered.
        """
        if not isinstance(argument, Argument):
            raise TypeError("register() argument must be an argument")

        if argument.default and not argument.expects:
            raise InvalidDefaultError(
                "--%s has a default value but does not expect a value" % argument.name,
                title="default without value",
                code=FaultCode.INVALID_DEFAULT,
                hint="pass expects=True or drop the default of --%s" % argument.name,
                argument=argument,
            )

        for registered in self._arguments:
            if registered.name == argument.name:
                raise DuplicateArgumentError(
                    "--%s is already a registered argument" % argument.name,
                    title="duplicated argument",
                    code=FaultCode.DUPLICATE_NAME,
                    hint="register every long name only once",
                    argument=argument,
                )
            if argument.short and registered.short == argument.short:
                raise DuplicateArgumentError(
                    "-%s is already a registered shorthand argument" % argument.short,
                    title="duplicated shorthand",
                    code=FaultCode.DUPLICATE_SHORTHAND,
                    hint="-%s already stands for --%s" % (argument.short, registered.name),
                    argument=argument,
                )

        self._arguments.append(argument)
        return argument

    def available_flags(self):
        """
        One-line summary of every registered argument, space separated.

        Each entry is "-short" when a shorthand exists, "--name" otherwise,
        followed by "=" when the argument expects a value.
        """
        return " ".join(argument.switch for argument in self._arguments)

    def format_usage(self, program, usage="", /):
        """
        Render the full usage banner as plain text.

        Parameters
        - program: str
          Program path shown after "USAGE:".
        - usage: str
          Custom fragment shown between the program and the flag summary.
        """
        banner = "USAGE: %s %s [%s]\nOptions:\n" % (program, usage, self.available_flags())
        width = max((len(argument.name) for argument in self._arguments), default=0)

        for argument in self._arguments:
            separator = "=" if argument.expects else " "

            line = "\t"
            if argument.short:
                line += " -%s%s " % (argument.short, separator)
            else:
                line += "    "

            line += "\t --%s%s " % (argument.name, separator)
            line += " " * (width - len(argument.name))
            line += "\t"

            if argument.descr:
                line += " %s" % argument.descr
            if argument.values:
                line += " [%s]" % ", ".join(argument.values)
            if argument.default:
                line += " [default=%s]" % argument.default

            banner += line + "\n"

        return banner


__all__ = (
    "Registry",
)
