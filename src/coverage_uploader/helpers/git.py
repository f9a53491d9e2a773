"""Git remote URL parsing.

Provides:
- parse_slug() — extracts owner/repo from an origin remote URL
"""

from __future__ import annotations

import re

from coverage_uploader.errors import SlugParseFailed

# git@github.com:owner/repo.git (SCP-like SSH form)
_SSH_REMOTE_RE = re.compile(r"^git@[^:]+:(?P<path>.+)$")

# .../owner/repo.git anywhere at the end of the string, whatever the scheme
_PATH_SUFFIX_RE = re.compile(r"(?:^|/)(?P<slug>[\w.-]+/[\w.-]+)\.git$")


def parse_slug(remote_url: str) -> str:
    """Parse an owner/repo slug from a git remote URL.

    Supports:
    - SSH: git@github.com:owner/repo.git
    - Any string ending in owner/repo.git, e.g. https://github.com/owner/repo.git

    Args:
        remote_url: Output of ``git config --get remote.origin.url``

    Returns:
        The ``owner/repo`` slug

    Raises:
        SlugParseFailed: If no owner/repo pair can be extracted
    """
    url = remote_url.strip()

    match = _SSH_REMOTE_RE.match(url)
    if match:
        path = match.group("path").strip("/")
        if path.endswith(".git"):
            path = path[:-4]
        segments = path.split("/")
        if len(segments) >= 2 and all(segments):
            return path
        raise SlugParseFailed(remote_url)

    match = _PATH_SUFFIX_RE.search(url)
    if match:
        return match.group("slug")

    raise SlugParseFailed(remote_url)
