import os
import stat
import sys

import pytest

from protoc_gui.compiler.process_runner import ExecutionResult
from protoc_gui.infrastructure.interfaces import ICommandRunner


class FakeRunner(ICommandRunner):
    """Records calls instead of starting protoc."""

    def __init__(self, result=None):
        self.result = result or ExecutionResult()
        self.calls = []

    def run(self, executable, args):
        self.calls.append((executable, list(args)))
        return self.result


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def proto_dir(tmp_path):
    folder = tmp_path / "protos"
    folder.mkdir()
    (folder / "a.proto").write_text('syntax = "proto3";\n')
    (folder / "b.proto").write_text('syntax = "proto3";\n')
    (folder / "notes.txt").write_text("not a proto\n")
    return folder


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script standing in for protoc."""
    if sys.platform.startswith("win"):
        pytest.skip("shell script stand-ins need a POSIX shell")

    def _make(body, name="fake_protoc"):
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return os.fspath(path)

    return _make
