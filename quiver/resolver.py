"""
Option resolution: map a textual token to its Option definition.

lookup_option(command, name)
- Scans the global scope first, in declared order, then the command's own options.
- The first exact (case-sensitive) match wins; no match returns None.
- command may be None when no subcommand has been identified yet, e.g. `tmsu --help`.
- A command option reusing a global name is shadowed: the global definition is always
  returned, so the command-local one is unreachable through this resolver.
- Pure: the result depends only on (scope, command.options, name).

audit(command)
- Registration-time check a registry may run on each command it accepts. It reports
  names declared twice within one scope (errors) and command names that collide with
  global ones (warnings, or errors in strict mode). lookup_option never calls it.
"""
from .faults import *
from .logs import get_logger
from .registry import GLOBAL_OPTIONS
from .utils import *

logger = get_logger("resolver")


def _scan(options, name):
    for option in options:
        if option.matches(name):
            return option
    return None


def lookup_option(command, name, /, *, scope=GLOBAL_OPTIONS):
    """
    Return the Option named `name` for `command`, or None when nothing matches.

    Parameters
    - command: Command | None
      The invoking subcommand, or None when no subcommand is selected.
    - name: str
      The token exactly as typed, e.g. "-v" or "--verbose".
    - scope: Options (keyword-only)
      The global option set searched first. Defaults to GLOBAL_OPTIONS.

    Returns
    - the matching Option from `scope` when one exists;
    - otherwise the first matching Option from command.options;
    - otherwise None. A negative lookup is not an error: the caller decides whether an
      unresolved token is a usage error.
    """
    if (option := _scan(scope, name)) is not None:
        return option
    if command is not None:
        return _scan(command.options, name)
    return None


def _duplicates(options):
    seen = set()
    for option in options:
        for name in option.names:
            if name in seen:
                yield name, option
            seen.add(name)


def audit(command, /, *, scope=GLOBAL_OPTIONS, strict=Unset, **options):
    """
    Check the option declarations of `command` against `scope`.

    Faults
    - DuplicateOptionError: a name declared twice in `scope` or in command.options.
    - ShadowedOptionWarning: a command option name that is also a global name.
      With strict=True this becomes a ShadowedOptionError. When strict is not given,
      the host setting __strict__ decides (False when absent).

    Warnings are triggered as they are found. Errors are collected; a single one is
    triggered alone, several are bundled into a CommandExit. Extra keyword options
    (shell, fancy, colorful) are forwarded to trigger().

    Returns
    - the command itself, so registries can write `register(audit(Tag()))`.
    """
    strict = bool(coalesce(strict, host("__strict__", False)))
    errors = []

    logger.debug("auditing %r against %d global option(s) (strict=%s)", command, len(scope), strict)

    scopes = [("global options", scope)]
    if command is not None:
        scopes.append(("command %r" % str(command.name), command.options))

    for label, declared in scopes:
        for name, option in _duplicates(declared):
            errors.append(DuplicateOptionError(
                "option name %r is declared more than once in %s" % (name, label),
                hint="rename or remove the later declaration %r" % option.descr,
                name=name,
                option=option,
            ))

    if command is not None:
        for option in command.options:
            for name in option.names:
                if (reserved := _scan(scope, name)) is None:
                    continue
                fault = ShadowedOptionError if strict else ShadowedOptionWarning
                shadowed = fault(
                    "option name %r of command %r is shadowed by a global option" % (name, str(command.name)),
                    hint="%r is reserved for %r; pick another name" % (name, reserved.descr),
                    name=name,
                    option=option,
                    reserved=reserved,
                )
                if strict:
                    errors.append(shadowed)
                else:
                    trigger(shadowed, command=command, **options)

    logger.debug(
        "audit of %r found %d error(s): %s",
        command, len(errors), ", ".join(error.options["name"] for error in errors)
    )

    if len(errors) == 1:
        trigger(errors[0], command=command, **options)
    elif errors:
        trigger(CommandExit(errors, command=command, **options))
    return command


__all__ = (
    "lookup_option",
    "audit",
)
