#!/usr/bin/env python3

"A small declarative command-line parser.  Declare your options, get back a dict of strings."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
cmdline/__init__.py
part of the cmdline software package
Copyright 2023 by the cmdline authors
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

# set to 1 to print the event log after every resolve
want_prints = 0


import big.all as big
from big.itertools import PushbackIterator
import enum
import os
import sys

from . import text


__all__ = [
    "CmdlineBaseException", "ConfigurationError", "UsageError",
    "UnknownOptionError", "MissingValueError", "UnexpectedValueError",
    "MissingPositionalError", "RepeatedOptionError",
    "Exit", "HelpRequested", "VersionRequested",
    "OptionKind", "ProgramOption", "OptionTable", "ScanState", "Parser",
    "program_name", "parse",
    ]


class CmdlineBaseException(Exception):
    pass

class ConfigurationError(CmdlineBaseException):
    """
    Raised when options are declared improperly.
    """
    pass


class UsageError(CmdlineBaseException):
    """
    Raised when the command-line doesn't match the declared options.
    """
    exit_code = 1

    def __init__(self, message, token=None):
        super().__init__(message)
        self.message = message
        self.token = token

class UnknownOptionError(UsageError):
    def __init__(self, token):
        super().__init__(f"unknown option '{token}'", token)

class MissingValueError(UsageError):
    def __init__(self, token, option):
        super().__init__(f"missing value for option '{token}' ({option.description}).", token)
        self.option = option

class UnexpectedValueError(UsageError):
    def __init__(self, token, message=None):
        super().__init__(message or f"unexpected value '{token}'.", token)

class MissingPositionalError(UsageError):
    def __init__(self, option):
        super().__init__(f"missing '{option.name}' value ({option.description}).")
        self.option = option

class RepeatedOptionError(UsageError):
    def __init__(self, token):
        super().__init__(f"option '{token}' specified more than once.", token)


class Exit(CmdlineBaseException):
    """
    Not an error: the command-line asked for help or the
    version, and the program should stop successfully.
    """
    exit_code = 0

class HelpRequested(Exit):
    pass

class VersionRequested(Exit):
    def __init__(self, version):
        super().__init__(version)
        self.version = version


class OptionKind(enum.Enum):
    POSITIONAL = "positional"
    FLAG_VALUE = "flag value"
    SWITCH = "switch"
    HELP = "help"
    VERSION = "version"


reserved = {
    "help": (OptionKind.HELP, ("-h", "--help"), "print this help message"),
    "version": (OptionKind.VERSION, ("-v", "--version"), "print program version"),
}


def _check_flag(flag):
    if len(flag) < 2:
        raise ConfigurationError(f"{flag!r} is not a legal option")
    if ("=" in flag) or any(c.isspace() for c in flag):
        raise ConfigurationError(f"option {flag!r} can't contain '=' or whitespace")


class ProgramOption:
    """
    One declared option.

    ProgramOption(name, description, default="") declares a positional,
    or one of the reserved options "help" and "version".  For those,
    description is the about-text or the version string respectively.

    ProgramOption(flags, description, default="") declares a flag.
    flags is an iterable of strings starting with '-'; at most one
    string without a leading '-' gives the option a canonical name,
    making it a flag that takes a value.  Without a name it's a switch.
    """

    def __init__(self, name_or_flags, description, default=""):
        if description.endswith("."):
            raise ConfigurationError(f"description {description!r} shouldn't end with a period")

        if isinstance(name_or_flags, str):
            self.name = name_or_flags
            self.flags = ()
            self.description = description
            self.default = default
            self.kind = OptionKind.POSITIONAL

            if self.name in reserved:
                if default:
                    raise ConfigurationError(f"{self.name!r} can't have a default value")
                self.kind, self.flags, self.description = reserved[self.name]
                self.default = description
            elif not self.name:
                raise ConfigurationError("positional option must have a name")
            elif self.name.startswith("-"):
                raise ConfigurationError(f"positional name {self.name!r} looks like a flag, pass a list of flags instead")
            elif not description:
                raise ConfigurationError(f"option {self.name!r} needs a description")
            return

        name = ""
        flags = []
        for s in name_or_flags:
            if s.startswith("-"):
                _check_flag(s)
                flags.append(s)
                continue
            if not s:
                raise ConfigurationError("empty string isn't a legal option name")
            if name:
                raise ConfigurationError(f"option has two names, {name!r} and {s!r}")
            name = s
        if not flags:
            raise ConfigurationError(f"no flags specified for {name!r}, declare a positional with ProgramOption({name!r}, ...)")
        if name in reserved:
            raise ConfigurationError(f"{name!r} is reserved")
        if not description:
            raise ConfigurationError(f"option {flags[0]} needs a description")

        self.name = name
        self.flags = tuple(flags)
        self.description = description
        self.default = default
        self.kind = OptionKind.FLAG_VALUE if name else OptionKind.SWITCH

    @property
    def required(self):
        return (self.kind is OptionKind.POSITIONAL) and not self.default

    def __repr__(self):
        if self.kind in (OptionKind.POSITIONAL, OptionKind.HELP, OptionKind.VERSION):
            first = repr(self.name)
        else:
            first = repr(self.flags + ((self.name,) if self.name else ()))
        return f"<ProgramOption {first} {self.kind.value} default={self.default!r}>"


def program_name(argv0):
    """
    Strips the directory from argv[0], splitting on
    the last '/' or os.altsep (if the platform has one).
    """
    index = argv0.rfind("/")
    if os.altsep and os.altsep != "/":
        index = max(index, argv0.rfind(os.altsep))
    return argv0[index + 1:]


class OptionTable:
    """
    The indexed form of a list of declarations.

    flags maps every flag alias to its option.  defaults is the
    result mapping before any arguments are scanned.  positional
    is the single positional option, or None.
    """

    def __init__(self, options):
        self.options = options
        self.flags = {}
        self.defaults = {}
        self.positional = None
        names = {}

        for option in options:
            for flag in option.flags:
                if flag in self.flags:
                    raise ConfigurationError(f"option {flag} is declared by both {self.flags[flag]} and {option}")
                self.flags[flag] = option
                self.defaults[flag] = option.default

            if option.kind is OptionKind.POSITIONAL:
                if self.positional:
                    raise ConfigurationError(f"only one positional option is supported, got {self.positional.name!r} and {option.name!r}")
                self.positional = option

            if option.kind in (OptionKind.POSITIONAL, OptionKind.FLAG_VALUE):
                other = names.get(option.name)
                if other:
                    raise ConfigurationError(f"{option.name!r} is the name of both {other} and {option}")
                names[option.name] = option
                self.defaults[option.name] = option.default


class ScanState:
    """
    The accumulator threaded through the scan.

    values is the result mapping so far, slot is the positional
    option still waiting for its value (or None), and bound is
    the set of keys set from the command-line.
    """

    def __init__(self, table):
        self.values = dict(table.defaults)
        self.slot = table.positional
        self.bound = set()

    def bind(self, keys, value, token):
        for key in keys:
            if key in self.bound:
                raise RepeatedOptionError(token)
        for key in keys:
            self.values[key] = value
            self.bound.add(key)


help_styles = ("unix", "windows")


class Parser:
    def __init__(self, options, *,
        help_style="unix",
        usage_max_columns=80,
        flag_column_width=20,
        ):
        if help_style not in help_styles:
            raise ConfigurationError(f"help_style must be one of {', '.join(help_styles)}, not {help_style!r}")
        self.help_style = help_style
        self.usage_max_columns = usage_max_columns
        self.flag_column_width = flag_column_width

        self.options = [o if isinstance(o, ProgramOption) else ProgramOption(*o) for o in options]
        self.table = OptionTable(self.options)
        self.log = big.Log()

    def resolve(self, argv):
        """
        Scans argv (argv[0] is the program) and returns the result
        mapping.  Doesn't print and doesn't exit; raises UsageError
        for a bad command-line and HelpRequested or VersionRequested
        when the user asked for them.
        """
        self.log = big.Log()
        self.log.enter("resolve")
        try:
            state = ScanState(self.table)
            arguments = PushbackIterator(argv[1:])
            for token in arguments:
                self.step(state, token, arguments)
            self.finish(state)
        finally:
            self.log.exit()
            if want_prints:
                self.log.print()
        return state.values

    def step(self, state, token, arguments):
        """
        Processes one token.  Flags that take a value
        consume the next token from arguments.
        """
        self.log(f"token {token!r}")
        if not token.startswith("-"):
            if not state.slot:
                raise UnexpectedValueError(token)
            state.bind((state.slot.name,), token, token)
            state.slot = None
            return state

        flag = token
        value = None
        option = self.table.flags.get(flag)
        if (not option) and ("=" in token):
            flag, _, value = token.partition("=")
            option = self.table.flags.get(flag)
        if not option:
            raise UnknownOptionError(token)

        kind = option.kind
        if kind in (OptionKind.HELP, OptionKind.VERSION):
            if value is not None:
                raise UnexpectedValueError(token, f"option '{flag}' doesn't take a value.")
            if kind is OptionKind.HELP:
                raise HelpRequested()
            raise VersionRequested(option.default)

        if kind is OptionKind.SWITCH:
            state.bind((flag,), "true" if value is None else value, flag)
            return state

        if value is None:
            if not arguments:
                raise MissingValueError(flag, option)
            value = next(arguments)
            if value.startswith("-"):
                raise MissingValueError(flag, option)
            self.log(f"value {value!r}")
        state.bind((option.name,) + option.flags, value, flag)
        return state

    def finish(self, state):
        if state.slot and state.slot.required:
            raise MissingPositionalError(state.slot)
        return state

    def _columns(self):
        try:
            columns, rows = os.get_terminal_size()
        except OSError:
            columns = 80
        return min(columns, self.usage_max_columns)

    def _wrap(self, description, indent):
        width = max(20, self._columns() - indent)
        return text.presplit_textwrap(description.split(), margin=width), width

    def usage(self, argv0=""):
        """
        Returns the help text, ending with a newline.
        """
        if self.help_style == "windows":
            return self._windows_usage(argv0)

        about = ""
        reserved_flags = []
        positionals = []
        for option in self.options:
            if option.kind is OptionKind.HELP:
                about = option.default
                reserved_flags.extend(option.flags)
            elif option.kind is OptionKind.VERSION:
                reserved_flags.extend(option.flags)
            elif option.kind is OptionKind.POSITIONAL:
                positionals.append(option.name if option.required else f"[{option.name}]")

        name = program_name(argv0)
        lines = [" ".join([f"Usage: {name} [OPTIONS]"] + positionals)]
        if reserved_flags:
            lines.append(f"       {name} [{' | '.join(reserved_flags)}]")
        lines.append("")
        if about:
            lines.append(about + ".")
            lines.append("")
        lines.append("Options:")
        lines.append("")
        flags_width = self.flag_column_width
        for option in self.options:
            if option.flags:
                description, width = self._wrap(option.description, 2 + flags_width)
                lines.append(text.merge_columns(
                    ("", 2),
                    (", ".join(option.flags), flags_width),
                    (description, width),
                    ))
        lines.append("")
        return "\n".join(lines)

    def _windows_usage(self, argv0):
        about = ""
        switches = []
        positionals = []
        for option in self.options:
            if option.kind is OptionKind.HELP:
                about = option.default
            elif option.kind is OptionKind.SWITCH:
                switches.append(f"[{option.flags[0]}]")
            elif option.kind is OptionKind.POSITIONAL:
                positionals.append(option.name if option.required else f"[{option.name}]")

        lines = []
        if about:
            lines.append(about + ".")
        lines.append("")
        lines.append(" ".join([program_name(argv0)] + switches + positionals))
        lines.append("")
        for option in self.options:
            if option.flags:
                lines.append("  " + ", ".join(option.flags))
                description, width = self._wrap(option.description, 8)
                lines.append(text.merge_columns(("", 8), (description, width)))
        lines.append("")
        return "\n".join(lines)

    def main(self, argv=None):
        """
        Like resolve(), but prints help, version, or the error
        plus usage, then exits the process.
        """
        if argv is None:
            argv = sys.argv
        argv0 = argv[0] if argv else ""
        try:
            return self.resolve(argv)
        except HelpRequested as e:
            print(self.usage(argv0))
            sys.stdout.flush()
            sys.exit(e.exit_code)
        except VersionRequested as e:
            print(e.version)
            sys.exit(e.exit_code)
        except UsageError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            print(self.usage(argv0))
            sys.exit(e.exit_code)


def parse(argv, options, **kwargs):
    """
    Parses argv against options and returns a dict mapping
    option keys to string values.  Exits the process on help,
    version, or a bad command-line.

    argv should include the program, e.g. sys.argv.
    """
    return Parser(options, **kwargs).main(argv)
