"""Tests for parse_slug()."""

from __future__ import annotations

import pytest

from coverage_uploader.errors import SlugParseFailed
from coverage_uploader.helpers.git import parse_slug


class TestParseSlug:
    """Remote URL to owner/repo conversion."""

    def test_ssh_url(self):
        assert parse_slug("git@github.com:testOrg/testRepo.git") == "testOrg/testRepo"

    def test_ssh_url_without_suffix(self):
        assert parse_slug("git@gitlab.com:owner/repo") == "owner/repo"

    def test_ssh_subgroup(self):
        """Nested groups after the host are kept whole."""
        assert parse_slug("git@gitlab.com:org/team/repo.git") == "org/team/repo"

    def test_http_url(self):
        assert parse_slug("http://github.com/testOrg/testRepo.git") == "testOrg/testRepo"

    def test_https_url(self):
        assert parse_slug("https://github.com/codecov/uploader.git") == "codecov/uploader"

    def test_unconventional_scheme(self):
        """Matching is on the trailing path shape, not the scheme."""
        assert parse_slug("foo+bar://example.org/some/deep/owner/repo.git") == "owner/repo"

    def test_dotted_names(self):
        assert parse_slug("https://github.com/my.org/my-repo.js.git") == "my.org/my-repo.js"

    def test_surrounding_whitespace(self):
        assert parse_slug("  git@github.com:owner/repo.git\n") == "owner/repo"

    @pytest.mark.parametrize(
        "url",
        [
            "notaurl",
            "",
            "http://github.com/testOrg/testRepo",
            "git@github.com:repo.git",
        ],
    )
    def test_unparseable(self, url):
        with pytest.raises(SlugParseFailed) as excinfo:
            parse_slug(url)
        assert excinfo.value.remote_url == url
