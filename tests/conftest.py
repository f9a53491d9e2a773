"""Shared fixtures for coverage uploader tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from coverage_uploader.helpers.process import CommandResult
from coverage_uploader.types import UploaderArgs, UploaderInputs


class FakeGitRunner:
    """CommandRunner double: returns stubbed results keyed by argument list.

    Unstubbed invocations report an error, like an unconfigured spawn.
    """

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []

    def when(self, args: Sequence[str], result: CommandResult) -> None:
        self.responses[tuple(args)] = result

    def __call__(self, args: Sequence[str]) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        return self.responses.get(key, CommandResult(error="not stubbed"))


@pytest.fixture
def fake_git() -> FakeGitRunner:
    """Runner with nothing stubbed."""
    return FakeGitRunner()


@pytest.fixture
def git_checkout() -> FakeGitRunner:
    """Runner answering like a healthy checkout of testOrg/testRepo on main."""
    return FakeGitRunner(
        {
            ("rev-parse", "--abbrev-ref", "HEAD"): CommandResult(stdout="main\n", returncode=0),
            ("rev-parse", "HEAD"): CommandResult(stdout="testSHA\n", returncode=0),
            ("config", "--get", "remote.origin.url"): CommandResult(
                stdout="git@github.com:testOrg/testRepo.git\n", returncode=0
            ),
        }
    )


@pytest.fixture
def empty_inputs() -> UploaderInputs:
    """No overrides and an empty environment."""
    return UploaderInputs(args=UploaderArgs(branch="", pr="", sha="", slug=""), environment={})
