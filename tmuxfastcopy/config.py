"""Configuration of the fastcopy command and its command-line flags."""

from __future__ import annotations

import json
import sys
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from tmuxfastcopy.alphabet import DEFAULT_ALPHABET, validate_alphabet
from tmuxfastcopy.must import not_errorf

DEFAULT_REGEXES: Mapping[str, str] = {
    "ipv4": r"\b\d{1,3}(?:\.\d{1,3}){3}\b",
    "gitsha": r"\b[0-9a-f]{7,40}\b",
    "hexaddr": r"\b(?i)0x[0-9a-f]{2,}\b",
    "hexcolor": r"(?i)#(?:[0-9a-f]{3}|[0-9a-f]{6})\b",
    "int": r"(?:-?|\b)\d{4,}\b",
    "path": r"(?:[^\w\-\.~/]|\A)(([\w\-\.]+|~)?(/[\w\-\.]+){2,})\b",
    "uuid": r"\b(?i)[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}\b",
    "isodate": r"\d{4}-\d{2}-\d{2}",
}


class Regexes(dict):
    """Map from regex name to body; an empty body disables that regex."""

    def put(self, key: str, value: str) -> None:
        """Set a regex, rejecting an empty name."""
        if not key:
            raise ValueError("regex must have a name")
        self[key] = value

    def set(self, value: str) -> None:
        """Add a regex given in the form ``NAME:REGEX``."""
        name, sep, body = value.partition(":")
        if not sep:
            raise ValueError("regex flags must be in the form NAME:REGEX")
        self.put(name, body)

    def flags(self) -> list[str]:
        """Return ``-regex NAME:REGEX`` arguments, ordered by name."""
        args: list[str] = []
        for name in sorted(self):
            args.extend(["-regex", f"{name}:{self[name]}"])
        return args

    def fill_from(self, other: Mapping[str, str]) -> None:
        """Copy regexes from ``other`` whose names are not set here yet."""
        for key, value in other.items():
            if key in self:
                continue
            try:
                self.put(key, value)
            except ValueError as exc:
                not_errorf(exc, "unexpected invalid key %r", key)

    def __str__(self) -> str:
        return "[" + " ".join(self.flags()) + "]"


@dataclass
class Config:
    """Settings for a fastcopy run."""

    pane: str = ""
    action: str = ""
    shift_action: str = ""
    alphabet: str = ""
    verbose: bool = False
    regexes: Regexes = field(default_factory=Regexes)
    tmux: str = ""
    log_file: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.regexes, Regexes):
            self.regexes = Regexes(self.regexes or {})

    def fill_from(self, other: Config) -> None:
        """Fill empty settings from ``other`` without overwriting set ones."""
        self.pane = self.pane or other.pane
        self.action = self.action or other.action
        self.shift_action = self.shift_action or other.shift_action
        self.alphabet = self.alphabet or other.alphabet
        self.log_file = self.log_file or other.log_file
        self.tmux = self.tmux or other.tmux
        self.regexes.fill_from(other.regexes)
        self.verbose = self.verbose or other.verbose

    def flags(self) -> list[str]:
        """Return arguments from which :func:`parse_flags` rebuilds this config."""
        args: list[str] = []
        if self.pane:
            args += ["-pane", self.pane]
        if self.action:
            args += ["-action", self.action]
        if self.shift_action:
            args += ["-shift-action", self.shift_action]
        if self.alphabet:
            args += ["-alphabet", self.alphabet]
        args += self.regexes.flags()
        if self.verbose:
            args.append("-verbose")
        if self.log_file:
            args += ["-log", self.log_file]
        if self.tmux:
            args += ["-tmux", self.tmux]
        return args


def default_config(cfg: Config) -> Config:
    """Return the default configuration for the tmux binary named by ``cfg``."""
    return Config(
        action=f"{cfg.tmux} load-buffer -",
        alphabet=DEFAULT_ALPHABET,
        regexes=Regexes(DEFAULT_REGEXES),
    )


_STRING_FLAGS = {
    "pane": "pane",
    "action": "action",
    "shift-action": "shift_action",
    "log": "log_file",
    "tmux": "tmux",
}

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _set_alphabet(cfg: Config, value: str) -> None:
    cfg.alphabet = value
    validate_alphabet(value)


def _apply(cfg: Config, name: str, value: str) -> None:
    if name in _STRING_FLAGS:
        setattr(cfg, _STRING_FLAGS[name], value)
    elif name == "alphabet":
        _set_alphabet(cfg, value)
    elif name == "regex":
        cfg.regexes.set(value)


def parse_flags(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line flags into a Config.

    Flags take one or two leading dashes and their value either after ``=``
    or as the next argument. Parsing stops at ``--`` or the first argument
    that is not a flag. Raises ValueError for malformed or invalid flags.
    """
    args = deque(sys.argv[1:] if argv is None else argv)
    cfg = Config(tmux="tmux")

    while args:
        arg = args[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        args.popleft()

        name = arg[1:]
        if name.startswith("-"):
            name = name[1:]
            if not name:
                break
        if not name or name[0] in "-=":
            raise ValueError(f"bad flag syntax: {arg}")

        name, eq, value = name.partition("=")
        has_value = bool(eq)

        if name in ("help", "h"):
            raise ValueError("flag: help requested")

        if name == "verbose":
            if not has_value:
                cfg.verbose = True
            elif value in _TRUE:
                cfg.verbose = True
            elif value in _FALSE:
                cfg.verbose = False
            else:
                raise ValueError(
                    f"invalid boolean value {json.dumps(value)} for -{name}: parse error"
                )
            continue

        if name not in _STRING_FLAGS and name not in ("alphabet", "regex"):
            raise ValueError(f"flag provided but not defined: -{name}")

        if not has_value:
            if not args:
                raise ValueError(f"flag needs an argument: -{name}")
            value = args.popleft()

        try:
            _apply(cfg, name, value)
        except ValueError as exc:
            raise ValueError(
                f"invalid value {json.dumps(value)} for flag -{name}: {exc}"
            ) from exc

    return cfg