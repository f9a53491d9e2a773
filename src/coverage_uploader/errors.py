"""Exception hierarchy for provider resolution."""

from __future__ import annotations

from typing import Sequence


class UploaderError(Exception):
    """Base exception for coverage uploader errors."""
    pass


class GitCommandFailed(UploaderError):
    """A git subcommand needed to resolve a field failed or printed nothing."""

    def __init__(self, field: str, command: Sequence[str], reason: str):
        self.field = field
        self.command = list(command)
        self.reason = reason
        super().__init__(
            f"Unable to resolve {field}: 'git {' '.join(self.command)}' failed: {reason}"
        )


class SlugParseFailed(UploaderError):
    """The origin remote URL could not be turned into an owner/repo slug."""

    def __init__(self, remote_url: str):
        self.remote_url = remote_url
        super().__init__(f"Unable to parse slug from remote URL: {remote_url!r}")


class ProviderNotFound(UploaderError):
    """No registered provider can run in the current environment."""

    def __init__(self, tried: Sequence[str]):
        self.tried = list(tried)
        super().__init__(
            f"No usable CI provider detected (tried: {', '.join(self.tried) or 'none'})"
        )
