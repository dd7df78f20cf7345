r"""
Flagpole argument descriptors.

Overview
- Argument: the static metadata of one command-line argument, i.e. its long
  name, an optional shorthand, a description, a default, the allowed values
  and whether a value is expected after "=".

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes
    the fields listed in __introspectable__ via read-only properties.

Metadata (sanitized on construction)
- name: str, required and non-empty; kept exactly as given.
- short: Unset | str; kept exactly as given. "" is treated as not provided.
- descr: Unset | str; kept exactly as given (the usage banner prints it
  verbatim). "" is treated as not provided.
- default: Unset | str; "" is treated as not provided.
- values: Iterable[str]; duplicates rejected, stored as a tuple in declared order.
- expects: bool; whether the argument takes a value (--name=value).

A default on an argument that does not expect a value is accepted here and
rejected at registration (see flagpole.registry), where the other
cross-argument rules live.

Quick example:
    >>> from flagpole.arguments import Argument
    >>> Argument("output", "o", descr="where to write", default="out.txt", expects=True)
    argument(name='output', short='o', descr='where to write', default='out.txt', values=(), expects=True)
"""
import functools
import operator
import re
from collections.abc import Iterable

from .utils import *


class ArgumentType(type):
    """
    Metaclass that turns descriptor classes into introspectable, read-only records.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the private "_{name}" backing field.
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_word(cls, metadata, key, /):
    """
    Internal: validate a name-like field ('name' or 'short').

    Rules
    - must be a string; "" means not provided. Any other spelling is kept as-is.
    """
    if not isinstance(word := metadata[key], str | Unset):
        raise TypeError(f"{cls.__typename__} {key!r} must be a string")
    if not word:
        metadata[key] = None


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate descriptor metadata in place.

    Raises
    - TypeError: on wrong types (non-string name/short/descr/default/values).
    - ValueError: on an empty name or duplicated values.
    """
    if isinstance(metadata["name"], str) and not metadata["name"]:
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    if metadata["name"] is Unset:
        raise TypeError(f"{cls.__typename__} must specify a name")
    _sanitize_word(cls, metadata, "name")
    _sanitize_word(cls, metadata, "short")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = descr or None

    if not isinstance(default := metadata["default"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'default' must be a string")
    metadata["default"] = default or None

    if isinstance(values := metadata["values"], str) or not isinstance(values, Iterable):
        raise TypeError(f"{cls.__typename__} 'values' must be an iterable of strings")
    sanitized = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{cls.__typename__} 'values' must be an iterable of strings")
        if value in sanitized:
            raise ValueError(f"{cls.__typename__} 'values' cannot contain duplicates")
        sanitized.append(value)
    metadata["values"] = tuple(sanitized)


class Argument(metaclass=ArgumentType):
    """
    Static metadata of a command-line argument.

    Instances are immutable: every field is a read-only property. The registry
    owns registered instances and never changes them.
    """

    __introspectable__ = (
        "name",
        "short",
        "descr",
        "default",
        "values",
        "expects",
    )

    def __new__(
            cls,
            name=Unset,
            short=Unset,
            *,
            descr=Unset,
            default=Unset,
            values=(),
            expects=False
    ):
        """
        Construct an Argument with the provided metadata.

        Parameters
        - name: str
          Long name, matched against "--name" and "--name=value" tokens.
        - short: Unset | str
          Shorthand, matched against "-short" and "-short=value" tokens.
        - descr: Unset | str
          Description shown in the usage banner.
        - default: Unset | str
          Default shown in the usage banner; only valid when expects is True.
        - values: Iterable[str]
          Allowed values shown in the usage banner (not enforced).
        - expects: bool
          Whether the argument takes a value.
        """
        metadata = {
            "name": name,
            "short": short,
            "descr": descr,
            "default": default,
            "values": values,
            "expects": bool(expects),
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def switch(self):
        """
        The spelling used in the one-line flag summary: "-short" when a
        shorthand exists, "--name" otherwise, with "=" for value-bearing ones.
        """
        switch = "-" + self.short if self.short else "--" + self.name
        return switch + "=" if self.expects else switch


__all__ = (
    "Argument",
)

# Remove the internal metaclass from the module namespace; not part of the public API.
del ArgumentType
