"""
Resolver behavioral tests (lookup precedence, shadowing, registration audit).

Scope
- Validate that global options resolve for every command, including no command.
- Validate command-local resolution, negative lookups and shadowing by globals.
- Validate audit faults: duplicates, shadowing (warning and strict), aggregation.

Conventions
- Test method names follow CamelCase per project convention.
- Tag and Status mirror the subcommands of a file-tagging tool.
"""

from __future__ import annotations

import __main__
import unittest
import warnings
from unittest import TestCase, mock

from quiver import (
    Command,
    CommandName,
    Option,
    Options,
    GLOBAL_OPTIONS,
    VERBOSE,
    HELP,
    VERSION,
    lookup_option,
    audit,
    CommandExit,
    DuplicateOptionError,
    ShadowedOptionError,
    ShadowedOptionWarning,
)


class _Command(Command):
    synopsis = ""
    description = ""

    def __init__(self, name, options):
        self._name = CommandName(name)
        self._options = options

    @property
    def name(self):
        return self._name

    @property
    def options(self):
        return self._options

    def execute(self, options, args, /):
        pass


ALL = Option("-a", "--all", "apply to all files")
TAG = _Command("tag", Options([
    ALL,
    Option("-r", "--recursive", "recursively apply tags to directory contents"),
    Option("-P", "--no-dereference", "do not follow symbolic links"),
]))
STATUS = _Command("status", Options([
    Option("-d", "--directory", "list directories themselves, not their contents"),
]))


class TestGlobalRegistry(TestCase):
    """The fixed, ordered global option set."""

    def testDeclaredInOrder(self):
        self.assertEqual(GLOBAL_OPTIONS, (VERBOSE, HELP, VERSION))
        self.assertEqual(GLOBAL_OPTIONS.names, ("-v", "--verbose", "-h", "--help", "-V", "--version"))

    def testDescriptions(self):
        self.assertEqual(VERBOSE, Option("-v", "--verbose", "show verbose messages"))
        self.assertEqual(HELP, Option("-h", "--help", "show help and exit"))
        self.assertEqual(VERSION, Option("-V", "--version", "show version information and exit"))

    def testIsImmutable(self):
        self.assertIsInstance(GLOBAL_OPTIONS, tuple)
        with self.assertRaises(AttributeError):
            GLOBAL_OPTIONS.append(ALL)  # type: ignore[attr-defined]


class TestLookupOption(TestCase):
    """Precedence-ordered lookup of option tokens."""

    def testHelpWithoutCommand(self):
        self.assertIs(lookup_option(None, "-h"), HELP)

    def testGlobalNamesResolveForEveryCommand(self):
        for command in (None, TAG, STATUS):
            for option in GLOBAL_OPTIONS:
                for name in option.names:
                    with self.subTest(command=command, name=name):
                        self.assertIs(lookup_option(command, name), option)

    def testCommandLocalOption(self):
        self.assertIs(lookup_option(TAG, "--all"), ALL)
        self.assertIs(lookup_option(TAG, "-a"), ALL)

    def testCommandLocalNamesResolveToStoredOptions(self):
        for command in (TAG, STATUS):
            for option in command.options:
                for name in option.names:
                    with self.subTest(command=command, name=name):
                        self.assertIs(lookup_option(command, name), option)

    def testUnknownNameIsNotFound(self):
        self.assertIsNone(lookup_option(TAG, "--bogus"))
        self.assertIsNone(lookup_option(None, "--bogus"))

    def testCommandOptionsNeedACommand(self):
        self.assertIsNone(lookup_option(None, "--all"))

    def testOtherCommandsOptionsAreNotVisible(self):
        self.assertIsNone(lookup_option(STATUS, "--all"))

    def testGlobalVersionBeforeCommandScan(self):
        self.assertIs(lookup_option(TAG, "-V"), VERSION)

    def testExactCaseSensitiveMatch(self):
        self.assertIsNone(lookup_option(TAG, "--Verbose"))
        self.assertIsNone(lookup_option(TAG, "-A"))
        self.assertIsNone(lookup_option(TAG, "--verbose=true"))
        self.assertIsNone(lookup_option(TAG, ""))

    def testGlobalShadowsCommandOption(self):
        loud = Option("-l", "--verbose", "show verbose tag messages")
        command = _Command("tag", Options([loud]))
        self.assertIs(lookup_option(command, "--verbose"), VERBOSE)
        self.assertIs(lookup_option(command, "-l"), loud)

    def testFirstDeclaredWinsWithinCommand(self):
        first = Option("-e", "--explicit", "first")
        second = Option("-x", "--explicit", "second")
        command = _Command("tags", Options([first, second]))
        self.assertIs(lookup_option(command, "--explicit"), first)
        self.assertIs(lookup_option(command, "-x"), second)

    def testIdempotent(self):
        for name in ("-h", "--all", "--bogus"):
            with self.subTest(name=name):
                self.assertIs(lookup_option(TAG, name), lookup_option(TAG, name))
        self.assertEqual(GLOBAL_OPTIONS, (VERBOSE, HELP, VERSION))

    def testExplicitScope(self):
        quiet = Option("-q", "--quiet", "suppress output")
        scope = Options([quiet])
        self.assertIs(lookup_option(None, "-q", scope=scope), quiet)
        self.assertIsNone(lookup_option(None, "-h", scope=scope))
        self.assertIs(lookup_option(TAG, "--all", scope=scope), ALL)

    def testCommandReturningPlainSequence(self):
        command = _Command("merge", [Option("-f", "--force", "")])
        self.assertEqual(lookup_option(command, "-f"), Option("-f", "--force", ""))


class TestAudit(TestCase):
    """Registration-time checks of option declarations."""

    def testCleanCommandPasses(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertIs(audit(TAG), TAG)
            self.assertIsNone(audit(None))

    def testShadowingWarnsByDefault(self):
        command = _Command("tag", Options([Option("-l", "--verbose", "")]))
        with self.assertWarns(ShadowedOptionWarning) as context:
            self.assertIs(audit(command, strict=False), command)
        self.assertEqual(context.warning.options["name"], "--verbose")
        self.assertIs(context.warning.options["reserved"], VERBOSE)

    def testShadowingIsAnErrorWhenStrict(self):
        command = _Command("tag", Options([Option("-h", "--host", "")]))
        with self.assertRaises(ShadowedOptionError) as context:
            audit(command, strict=True)
        self.assertEqual(context.exception.options["name"], "-h")
        self.assertIs(context.exception.options["command"], command)

    def testStrictDefaultsToHostSetting(self):
        command = _Command("tag", Options([Option("-V", "--values", "")]))
        with mock.patch.object(__main__, "__strict__", True, create=True):
            with self.assertRaises(ShadowedOptionError):
                audit(command)

    def testDuplicateInCommand(self):
        command = _Command("tag", Options([
            Option("-t", "--tags", "first"),
            Option("-T", "--tags", "second"),
        ]))
        with self.assertRaises(DuplicateOptionError) as context:
            audit(command)
        self.assertEqual(context.exception.options["name"], "--tags")
        self.assertIn("command 'tag'", context.exception.message)

    def testDuplicateInScope(self):
        scope = Options([VERBOSE, Option("-v", "--values", "")])
        with self.assertRaises(DuplicateOptionError) as context:
            audit(None, scope=scope)
        self.assertIn("global options", context.exception.message)

    def testSeveralErrorsAreBundled(self):
        command = _Command("tag", Options([
            Option("-t", "--tags", "first"),
            Option("-t", "--tags", "second"),
            Option("-h", "", "shadowed"),
        ]))
        with self.assertRaises(CommandExit) as context:
            audit(command, strict=True)
        errors = context.exception.exceptions
        self.assertEqual(len(errors), 3)
        self.assertEqual([type(error) for error in errors], [DuplicateOptionError, DuplicateOptionError, ShadowedOptionError])

    def testAuditDoesNotChangeLookup(self):
        command = _Command("tag", Options([Option("-l", "--verbose", "")]))
        with self.assertWarns(ShadowedOptionWarning):
            audit(command, strict=False)
        self.assertIs(lookup_option(command, "--verbose"), VERBOSE)


if __name__ == "__main__":
    unittest.main()
