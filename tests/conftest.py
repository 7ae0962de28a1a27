import io
import os

import pytest

from errors import UnknownOwner
from models import Configuration
from printer import render


class FakeOwnerResolver:
    """Resolves uids from a fixed mapping instead of the user database."""

    def __init__(self, names: dict[int, str]):
        self.names = names

    def resolve(self, uid: int) -> str:
        try:
            return self.names[uid]
        except KeyError:
            raise UnknownOwner(uid) from None


@pytest.fixture
def listing_tree(tmp_path, monkeypatch):
    """Create the tests/ tree used throughout and chdir next to it.

    tests/
        abc
        test_file
        hello/.bye
        hello/hi
        tests1/a, tests1/b
        tests2/c, tests2/d
    """
    root = tmp_path / "tests"
    for directory in ("hello", "tests1", "tests2"):
        (root / directory).mkdir(parents=True)

    for name in ("abc", "test_file", "hello/.bye", "hello/hi",
                 "tests1/a", "tests1/b", "tests2/c", "tests2/d"):
        (root / name).write_text("")

    monkeypatch.chdir(tmp_path)
    return root


@pytest.fixture
def owners(tmp_path):
    uid = tmp_path.stat().st_uid
    return FakeOwnerResolver({uid: "lilo"})


@pytest.fixture
def run_render(owners):
    """Render a configuration to a string with the fake owner resolver."""

    def run(directories, flags=(), color=True):
        config = Configuration(directories=list(directories), flags=set(flags))
        sink = io.StringIO()
        render(config, sink, resolver=owners, color=color)
        return sink.getvalue()

    return run


@pytest.fixture
def unknown_owners():
    return FakeOwnerResolver({})


@pytest.fixture
def dangling_tree(tmp_path, monkeypatch):
    """links/ holding a regular file and a symlink to nothing."""
    root = tmp_path / "links"
    root.mkdir()
    (root / "file").write_text("")
    (root / "dangling").symlink_to("nowhere")
    monkeypatch.chdir(tmp_path)
    return root


@pytest.fixture
def undecodable_tree(tmp_path, monkeypatch):
    """names/ holding a file whose name is not valid UTF-8."""
    root = tmp_path / "names"
    root.mkdir()
    try:
        with open(os.path.join(os.fsencode(root), b"bad\xff"), "w"):
            pass
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    monkeypatch.chdir(tmp_path)
    return root
