"""
Quiver command layer: the capability every subcommand satisfies.

What this module provides
- CommandName: the identifier a registry uses to find a command ("tag", "status", ...).
- Command: abstract capability interface. The generic frontend (tokenizer, help renderer,
  dispatcher) talks to subcommands only through it.

Contract
- name         -> CommandName, stable and unique within a registry.
- synopsis     -> str, one-line usage summary.
- description  -> str, long-form help text.
- options      -> Options, the command's own flags (global ones excluded).
- execute(options, args)
               -> runs the subcommand with its ResolvedOptions and remaining arguments;
                  failures are raised as quiver.faults.ExecutionError and surface unchanged.

Every member is abstract: a subclass that leaves one out cannot be instantiated. The base
holds no state, so each concrete command owns whatever it needs.

Quick example:
    from quiver import Command, CommandName, Option, Options

    class Tag(Command):
        name = CommandName("tag")
        synopsis = "tag [OPTION]... FILE TAG..."
        description = "Tags the file FILE with the TAGs specified."
        options = Options([Option("-a", "--all", "apply to all files")])

        def execute(self, options, args):
            ...

Class attributes satisfy the abstract properties, as do properties computed per instance.
"""
from abc import ABC, abstractmethod


class CommandName(str):
    """
    Name under which a command is registered and invoked.
    """
    __slots__ = ()

    def __repr__(self):
        return "command-name(%s)" % super().__repr__()


class Command(ABC):
    """
    Abstract capability interface implemented by each CLI subcommand.

    Lifecycle
    - Constructed and registered by an external registry.
    - Handed to quiver.resolver.lookup_option for the duration of one lookup and
      never retained by it.
    """
    __slots__ = ()

    @property
    @abstractmethod
    def name(self):
        """
        Stable, unique identifier used for registry lookup.
        """

    @property
    @abstractmethod
    def synopsis(self):
        """
        One-line usage summary.
        """

    @property
    @abstractmethod
    def description(self):
        """
        Long-form help text.
        """

    @property
    @abstractmethod
    def options(self):
        """
        The command's own recognized flags, excluding the global ones.
        """

    @abstractmethod
    def execute(self, options, args, /):
        """
        Run the subcommand.

        Parameters
        - options: ResolvedOptions
          The options a dispatcher resolved from the command line.
        - args: Sequence[str]
          The remaining, non-option arguments.

        Raises
        - ExecutionError when the operation cannot complete.
        """

    def __repr__(self):
        return "<%s name=%r>" % (type(self).__name__, str(self.name))

    def __rich_repr__(self):
        yield "name", str(self.name)
        yield "synopsis", self.synopsis
        yield "options", self.options


__all__ = (
    "CommandName",
    "Command",
)
