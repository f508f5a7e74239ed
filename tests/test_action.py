import io

import pytest

from tmuxfastcopy.action import (
    ActionFactory,
    ActionRequest,
    ArgAction,
    StdinAction,
    regex_names_env_entry,
)
from tmuxfastcopy.logger import Logger
from tmuxfastcopy.matches import Selection

CWD = "/foo/bar"


def _factory():
    return ActionFactory(getcwd=lambda: CWD)


@pytest.mark.parametrize(
    "give, want",
    [
        (ActionRequest("pbcopy"), StdinAction(cmd="pbcopy", args=[], dir=CWD)),
        (
            ActionRequest("tmux set-buffer -- {}"),
            ArgAction(
                cmd="tmux", before_args=["set-buffer", "--"], after_args=[], dir=CWD
            ),
        ),
        (
            ActionRequest("pbcopy", dir="/tmp"),
            StdinAction(cmd="pbcopy", args=[], dir="/tmp"),
        ),
        (
            ActionRequest("tmux set-buffer -- {}", dir="/tmp"),
            ArgAction(
                cmd="tmux", before_args=["set-buffer", "--"], after_args=[], dir="/tmp"
            ),
        ),
        (
            ActionRequest("pbcopy", target_pane_id="123"),
            StdinAction(cmd="pbcopy", args=[], pane_id="123", dir=CWD),
        ),
        (
            ActionRequest("tmux set-buffer -- {}", target_pane_id="123"),
            ArgAction(
                cmd="tmux",
                before_args=["set-buffer", "--"],
                after_args=[],
                pane_id="123",
                dir=CWD,
            ),
        ),
    ],
    ids=[
        "stdin",
        "argument",
        "stdin with dir",
        "argument with dir",
        "stdin with pane ID",
        "argument with pane ID",
    ],
)
def test_new_action(give, want):
    got = _factory().new(give)
    assert type(got) is type(want)
    assert got == want


@pytest.mark.parametrize(
    "action, message",
    [("", "empty action"), ('foo "', "invalid command line string")],
)
def test_new_action_errors(action, message):
    with pytest.raises(ValueError, match=message):
        _factory().new(ActionRequest(action))


def test_new_action_no_cwd():
    def failing_getcwd():
        raise OSError("great sadness")

    got = ActionFactory(getcwd=failing_getcwd).new(ActionRequest("pbcopy"))
    assert got.dir == ""


def test_regex_names_env_entry():
    assert regex_names_env_entry(["x", "y"]) == "FASTCOPY_REGEX_NAME=x y"


def test_stdin_action():
    buff = io.StringIO()
    action = StdinAction(cmd="cat", log=Logger(buff), environ=lambda: {})
    action.run(Selection(text="foo", matchers=["x"]))
    assert buff.getvalue() == "[cat] foo\n"


def test_stdin_action_regexes_env():
    buff = io.StringIO()
    action = StdinAction(cmd="env", log=Logger(buff), environ=lambda: {"FOO": "bar"})
    action.run(Selection(text="foo", matchers=["x", "y"]))
    assert "[env] FASTCOPY_REGEX_NAME=x y\n" in buff.getvalue()
    assert "[env] FOO=bar\n" in buff.getvalue()


def test_arg_action():
    buff = io.StringIO()
    action = ArgAction(
        cmd="echo",
        before_args=["1", "2"],
        after_args=["3", "4"],
        log=Logger(buff),
        environ=lambda: {},
    )
    action.run(Selection(text="foo", matchers=["x"]))
    assert buff.getvalue() == "[echo] 1 2 foo 3 4\n"


def test_arg_action_regexes_env():
    buff = io.StringIO()
    action = ArgAction(
        cmd="bash",
        before_args=["-c", "env"],
        log=Logger(buff),
        environ=lambda: {"FOO": "bar"},
    )
    action.run(Selection(text="foo", matchers=["x", "y"]))
    assert "[bash] FASTCOPY_REGEX_NAME=x y\n" in buff.getvalue()
    assert "[bash] FOO=bar\n" in buff.getvalue()


def test_action_pane_id_env():
    buff = io.StringIO()
    action = StdinAction(
        cmd="env", pane_id="%3", log=Logger(buff), environ=lambda: {}
    )
    action.run(Selection(text="foo", matchers=["x"]))
    assert "[env] FASTCOPY_TARGET_PANE_ID=%3\n" in buff.getvalue()


def test_action_failure_raises():
    import subprocess

    buff = io.StringIO()
    action = ArgAction(
        cmd="sh",
        before_args=["-c", "echo oops; exit 3", "--"],
        log=Logger(buff),
        environ=lambda: {},
    )
    with pytest.raises(subprocess.CalledProcessError):
        action.run(Selection(text="foo", matchers=["x"]))
    assert buff.getvalue() == "[sh] oops\n"