"""Input and output structures shared by every CI provider.

Provides:
- UploaderArgs: caller-supplied overrides (from the argument parser)
- UploaderInputs: overrides + captured environment for one resolution
- ServiceParams: resolved commit identity handed to the upload pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class UploaderArgs:
    """Override fields recognised by the providers.

    ``None`` and ``""`` both mean the option was not supplied.
    """

    branch: str | None = None
    pr: str | None = None
    sha: str | None = None
    slug: str | None = None


@dataclass(frozen=True)
class UploaderInputs:
    """Everything a provider may consult for a single resolution."""

    args: UploaderArgs = field(default_factory=UploaderArgs)
    environment: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceParams:
    """Commit identity for one coverage upload.

    Fields:
        branch: Branch the report belongs to
        build: CI build number (empty outside hosted CI)
        build_url: CI build URL (empty outside hosted CI)
        commit: Full commit SHA
        job: CI job identifier (empty outside hosted CI)
        pr: Pull request number, if any
        service: CI service name (empty for the local provider)
        slug: Repository in owner/repo form
    """

    branch: str = ""
    build: str = ""
    build_url: str = ""
    commit: str = ""
    job: str = ""
    pr: str = ""
    service: str = ""
    slug: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the upload API field names."""
        return {
            "branch": self.branch,
            "build": self.build,
            "buildURL": self.build_url,
            "commit": self.commit,
            "job": self.job,
            "pr": self.pr,
            "service": self.service,
            "slug": self.slug,
        }
