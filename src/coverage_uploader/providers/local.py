"""Local git provider.

Fallback provider used when no hosted CI system is detected. Commit
identity is taken from explicit overrides, then from the ``GIT_BRANCH`` /
``GIT_COMMIT`` environment variables, then from the local git checkout.

Provides:
- LocalProvider — resolver bound to an injectable CommandRunner
- detect(), get_service_params(), get_env_var_names() — module-level
  helpers bound to the real git executable
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from coverage_uploader.errors import GitCommandFailed
from coverage_uploader.helpers.git import parse_slug
from coverage_uploader.helpers.process import CommandRunner, git_runner
from coverage_uploader.types import ServiceParams, UploaderInputs

logger = logging.getLogger(__name__)

BRANCH_COMMAND = ("rev-parse", "--abbrev-ref", "HEAD")
COMMIT_COMMAND = ("rev-parse", "HEAD")
REMOTE_URL_COMMAND = ("config", "--get", "remote.origin.url")

# A strategy returns the field value, or None to defer to the next one.
Strategy = Callable[[UploaderInputs], Optional[str]]


def from_override(name: str) -> Strategy:
    """Read ``inputs.args.<name>``; empty strings count as unset."""

    def strategy(inputs: UploaderInputs) -> str | None:
        return getattr(inputs.args, name) or None

    return strategy


def from_environment(variable: str) -> Strategy:
    """Read an environment variable; empty strings count as unset."""

    def strategy(inputs: UploaderInputs) -> str | None:
        return inputs.environment.get(variable) or None

    return strategy


@dataclass(frozen=True)
class FieldResolver:
    """Ordered precedence chain for one ServiceParams field.

    ``required`` fields raise when every strategy defers; optional ones
    fall back to ``""``.
    """

    name: str
    strategies: tuple[Strategy, ...]
    required: bool = True

    def resolve(self, inputs: UploaderInputs) -> str:
        for strategy in self.strategies:
            value = strategy(inputs)
            if value is not None:
                return value
        if self.required:
            raise GitCommandFailed(self.name, (), "no value available")
        return ""


class LocalProvider:
    """Resolve commit identity from overrides, environment and local git."""

    name = "local"
    env_var_names = ("GIT_BRANCH", "GIT_COMMIT")

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner or git_runner()

    def detect(self, environment: Mapping[str, str] | None = None) -> bool:
        """Return True if the git executable can be launched.

        The environment is ignored; the argument exists so the provider
        fits the registry's calling convention.
        """
        result = self.runner([])
        if not result.started:
            logger.debug("git is not available: %s", result.error)
            return False
        return True

    def get_env_var_names(self) -> list[str]:
        """Environment variables this provider consults."""
        return list(self.env_var_names)

    def field_resolvers(self) -> tuple[FieldResolver, ...]:
        """Precedence chains in evaluation order (branch, commit, pr, slug)."""
        return (
            FieldResolver(
                "branch",
                (from_override("branch"), from_environment("GIT_BRANCH"), self._from_git("branch", BRANCH_COMMAND)),
            ),
            FieldResolver(
                "commit",
                (from_override("sha"), from_environment("GIT_COMMIT"), self._from_git("commit", COMMIT_COMMAND)),
            ),
            FieldResolver("pr", (from_override("pr"),), required=False),
            FieldResolver("slug", (from_override("slug"), self._slug_from_remote)),
        )

    async def get_service_params(self, inputs: UploaderInputs) -> ServiceParams:
        """Resolve branch, commit, pr and slug for ``inputs``.

        Fields are resolved strictly in order, so a branch failure surfaces
        before any commit or slug git call is made.

        Raises:
            GitCommandFailed: A required git fallback errored or printed nothing
            SlugParseFailed: The origin remote URL has no owner/repo shape
        """
        resolved = {resolver.name: resolver.resolve(inputs) for resolver in self.field_resolvers()}
        logger.debug("Resolved local service params: %s", resolved)
        return ServiceParams(
            branch=resolved["branch"],
            commit=resolved["commit"],
            pr=resolved["pr"],
            slug=resolved["slug"],
        )

    def _run_git(self, field: str, command: Sequence[str]) -> str:
        result = self.runner(command)
        if result.error:
            raise GitCommandFailed(field, command, result.error)
        output = result.stdout.strip()
        if not output:
            raise GitCommandFailed(field, command, "empty output")
        return output

    def _from_git(self, field: str, command: Sequence[str]) -> Strategy:
        def strategy(inputs: UploaderInputs) -> str:
            return self._run_git(field, command)

        return strategy

    def _slug_from_remote(self, inputs: UploaderInputs) -> str:
        return parse_slug(self._run_git("slug", REMOTE_URL_COMMAND))


_default_provider = LocalProvider()


def detect(runner: CommandRunner | None = None) -> bool:
    """Return True if a local git executable is usable."""
    provider = LocalProvider(runner) if runner is not None else _default_provider
    return provider.detect()


def get_env_var_names() -> list[str]:
    return _default_provider.get_env_var_names()


async def get_service_params(inputs: UploaderInputs, runner: CommandRunner | None = None) -> ServiceParams:
    """Resolve service params with the real git executable, or ``runner`` if given."""
    provider = LocalProvider(runner) if runner is not None else _default_provider
    return await provider.get_service_params(inputs)
