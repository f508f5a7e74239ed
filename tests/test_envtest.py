import pytest

from tmuxfastcopy.envtest import EMPTY, Env, pairs


@pytest.fixture
def env():
    return pairs("FOO", "bar", "BAZ", "")


def test_getenv_match(env):
    assert env.getenv("FOO") == "bar"


def test_getenv_empty_match(env):
    assert env.getenv("BAZ") == ""


def test_getenv_no_match(env):
    assert env.getenv("QUX") == ""


def test_empty_env():
    assert EMPTY.getenv("QUX") == ""
    assert Env().getenv("FOO") == ""


def test_later_pairs_override_earlier():
    assert pairs("A", "1", "A", "2").getenv("A") == "2"


def test_pairs_odd_arguments():
    with pytest.raises(ValueError, match="not even"):
        pairs("foo", "bar", "baz")