"""Commands run on the user's selection."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from tmuxfastcopy.logger import DISCARD, Logger, LogWriter
from tmuxfastcopy.matches import Selection

_PLACEHOLDER_ARG = "{}"
_REGEX_NAMES_ENV_KEY = "FASTCOPY_REGEX_NAME"
_TARGET_PANE_ENV_KEY = "FASTCOPY_TARGET_PANE_ID"

Environ = Callable[[], Mapping[str, str]]


def _os_environ() -> Mapping[str, str]:
    return dict(os.environ)


def regex_names_env_entry(matchers: Sequence[str]) -> str:
    """Return the ``KEY=VALUE`` entry naming the matchers of a selection."""
    return f"{_REGEX_NAMES_ENV_KEY}={' '.join(matchers)}"


def _run(
    cmd: str,
    args: Sequence[str],
    *,
    selection: Selection,
    stdin: bytes | None,
    dir: str,
    log: Logger,
    pane_id: str,
    environ: Environ,
) -> None:
    env = dict(environ())
    key, _, value = regex_names_env_entry(selection.matchers).partition("=")
    env[key] = value
    env[_TARGET_PANE_ENV_KEY] = pane_id

    executable = shutil.which(cmd) or cmd
    with LogWriter(log.with_name(cmd)) as logw:
        proc = subprocess.run(
            [executable, *args],
            input=stdin if stdin is not None else b"",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            cwd=dir or None,
            env=env,
            check=False,
        )
        logw.write(proc.stdout)
    proc.check_returncode()


@dataclass
class StdinAction:
    """Runs a command with the selected text on its standard input."""

    cmd: str
    args: list[str] = field(default_factory=list)
    dir: str = ""
    pane_id: str = ""
    log: Logger = field(default=DISCARD, compare=False, repr=False)
    environ: Environ = field(default=_os_environ, compare=False, repr=False)

    def run(self, selection: Selection) -> None:
        """Run the command, logging its output; raise if it fails."""
        _run(
            self.cmd,
            self.args,
            selection=selection,
            stdin=selection.text.encode(),
            dir=self.dir,
            log=self.log,
            pane_id=self.pane_id,
            environ=self.environ,
        )


@dataclass
class ArgAction:
    """Runs a command with the selected text in place of ``{}``."""

    cmd: str
    before_args: list[str] = field(default_factory=list)
    after_args: list[str] = field(default_factory=list)
    dir: str = ""
    pane_id: str = ""
    log: Logger = field(default=DISCARD, compare=False, repr=False)
    environ: Environ = field(default=_os_environ, compare=False, repr=False)

    def run(self, selection: Selection) -> None:
        """Run the command, logging its output; raise if it fails."""
        _run(
            self.cmd,
            [*self.before_args, selection.text, *self.after_args],
            selection=selection,
            stdin=None,
            dir=self.dir,
            log=self.log,
            pane_id=self.pane_id,
            environ=self.environ,
        )


Action = StdinAction | ArgAction


@dataclass(frozen=True)
class ActionRequest:
    """A shell command to build an action from.

    ``dir`` defaults to the current directory when empty.
    """

    action: str
    dir: str = ""
    target_pane_id: str = ""


@dataclass
class ActionFactory:
    """Builds actions from shell command strings."""

    log: Logger = DISCARD
    environ: Environ = _os_environ
    getcwd: Callable[[], str] = os.getcwd

    def new(self, request: ActionRequest) -> Action:
        """Build an action; ``{}`` among the arguments receives the selection.

        Without ``{}``, the selection is sent over standard input.
        """
        try:
            args = shlex.split(request.action)
        except ValueError as exc:
            raise ValueError(f"invalid command line string: {exc}") from exc
        if not args:
            raise ValueError("empty action")

        dir = request.dir
        if not dir:
            try:
                dir = self.getcwd()
            except OSError:
                dir = ""

        cmd, *rest = args
        if _PLACEHOLDER_ARG in rest:
            i = rest.index(_PLACEHOLDER_ARG)
            return ArgAction(
                cmd=cmd,
                before_args=rest[:i],
                after_args=rest[i + 1 :],
                dir=dir,
                pane_id=request.target_pane_id,
                log=self.log,
                environ=self.environ,
            )
        return StdinAction(
            cmd=cmd,
            args=rest,
            dir=dir,
            pane_id=request.target_pane_id,
            log=self.log,
            environ=self.environ,
        )