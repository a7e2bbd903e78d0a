"""Shared test fixtures for addonpack."""

import pytest

from addonpack.config.models import AddonPackConfig
from addonpack.tree.models import DirNode, FileNode


def make_file(name, contents=b""):
    return FileNode(name=name, contents=contents)


@pytest.fixture
def sample_config():
    return AddonPackConfig()


@pytest.fixture
def sample_tree():
    """A small add-on: two top-level files, a maps/ dir and an empty dir."""
    return DirNode(
        name="Sample_Addon",
        files=[
            make_file("_main.cfg", b"[campaign]\nid=sample\n[/campaign]\n"),
            make_file("_server.pbl", b"title=Sample\r\nversion=1.0\r\n"),
        ],
        dirs=[
            DirNode(
                name="maps",
                files=[make_file("01_Start.map", b"Gg, Gg, Gs\x00\xfe")],
                dirs=[DirNode(name="extra", files=[make_file("notes.txt", b"hello")])],
            ),
            DirNode(name="empty"),
        ],
    )


@pytest.fixture
def sample_mapping():
    """The sample add-on in host attribute-tree form."""
    return {
        "name": "Sample_Addon",
        "file": [
            {"name": "_main.cfg", "contents": b"[campaign]\nid=sample\n[/campaign]\n"},
            {"name": "_server.pbl", "contents": b"title=Sample\r\nversion=1.0\r\n"},
        ],
        "dir": [
            {
                "name": "maps",
                "file": [{"name": "01_Start.map", "contents": b"Gg, Gg, Gs\x00\xfe"}],
                "dir": [{"name": "extra", "file": [{"name": "notes.txt", "contents": b"hello"}]}],
            },
            {"name": "empty"},
        ],
    }
