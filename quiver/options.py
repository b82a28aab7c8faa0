r"""
Quiver option declarations.

Overview
- Option: an immutable (short, long, descr) triple describing one recognized flag,
  e.g. Option("-v", "--verbose", "show verbose messages").
- Options: an immutable, ordered sequence of Option values (a tuple subclass).
- ResolvedOptions: the Options a dispatcher hands to Command.execute once it has
  resolved the tokens of a command line.

Semantics
- Either name slot may be the empty string, meaning the option has no such form.
  The empty string is never a name and never matches a lookup.
- Matching is exact and case-sensitive; there is no prefix matching, no '=' splitting
  and no normalization of dashes.
- No validation happens here. Unique names inside a scope are the caller's invariant,
  checked at registration time by quiver.resolver.audit.
- Options.find scans in declared order and returns the stored element itself, so the
  result is a stable reference into immutable storage.

Quick example:
    >>> from quiver.options import Option, Options
    >>> tag = Options([Option("-a", "--all", "apply to all files")])
    >>> tag.find("--all")
    option(short='-a', long='--all', descr='apply to all files')
    >>> tag.find("--bogus") is None
    True
"""
import re

from .utils import *


class OptionType(type):
    """
    Metaclass that exposes declared fields as read-only properties.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens, lowered)
      for messages and representations.
    - Publish every name listed in __introspectable__ as a mirrored, read-only property
      over the "_{name}" slot.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        return super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )


class Option(metaclass=OptionType):
    """
    A single recognized command-line flag and its documentation.

    Option is a passive value type: two options with the same triple are equal and
    hash alike. Instances are immutable; attribute assignment raises AttributeError.

    Properties
    - short: str, the short form (e.g. "-v"), or "" when absent.
    - long: str, the long form (e.g. "--verbose"), or "" when absent.
    - descr: str, a human-readable description for help output.
    - names: tuple[str, ...], the non-empty forms in (short, long) order.
    """

    __introspectable__ = (
        "short",
        "long",
        "descr",
    )
    __slots__ = tuple("_" + name for name in __introspectable__)

    def __new__(cls, short="", long="", descr="", /):
        self = super().__new__(cls)
        for name, value in zip(cls.__introspectable__, (short, long, descr)):
            object.__setattr__(self, "_" + name, value)
        return self

    @property
    def names(self):
        return tuple(name for name in (self._short, self._long) if name)

    def matches(self, name, /):
        """
        Return True when `name` is exactly this option's short or long form.
        """
        return bool(name) and name in (self._short, self._long)

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__typename__} is immutable")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__typename__} is immutable")

    def __eq__(self, other, /):
        if not isinstance(other, Option):
            return NotImplemented
        return (self._short, self._long, self._descr) == (other._short, other._long, other._descr)

    def __hash__(self):
        return hash((self._short, self._long, self._descr))

    def __reduce__(self):
        return type(self), (self._short, self._long, self._descr)

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__typename__,
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
        )

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


class Options(tuple):
    """
    Ordered, immutable sequence of Option values.

    Order matters for display and for the first-match rule of find(); it does not
    otherwise affect resolution. Slicing and concatenation keep the Options type.
    """
    __slots__ = ()

    def __new__(cls, options=(), /):
        options = tuple(options)
        for option in options:
            if not isinstance(option, Option):
                raise TypeError("options items must be option instances, not %r" % type(option).__name__)
        return super().__new__(cls, options)

    @property
    def names(self):
        return tuple(name for option in self for name in option.names)

    def find(self, name, /):
        """
        Return the first option declared under `name`, or None.

        When a scope carries the same name twice, the first declaration wins.
        """
        for option in self:
            if option.matches(name):
                return option
        return None

    def has(self, name, /):
        return self.find(name) is not None

    def __getitem__(self, index, /):
        item = super().__getitem__(index)
        if isinstance(index, slice):
            return type(self)(item)
        return item

    def __add__(self, other, /):
        if not isinstance(other, tuple | list):
            return NotImplemented
        return Options(tuple(self) + tuple(other))

    def __repr__(self):
        return "options(%s)" % ", ".join(map(repr, self))

    def __rich_repr__(self):
        yield from self


# Options resolved from a command line and handed to Command.execute.
ResolvedOptions = Options


__all__ = (
    "Option",
    "Options",
    "ResolvedOptions",
)

del OptionType
