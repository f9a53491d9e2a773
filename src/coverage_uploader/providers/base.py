"""Provider protocol shared by every CI provider.

A provider decides whether it applies to the current execution
environment and, if so, resolves the ServiceParams for an upload.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from coverage_uploader.types import ServiceParams, UploaderInputs


@runtime_checkable
class Provider(Protocol):
    """Protocol for commit-identity providers."""

    name: str

    def detect(self, environment: Mapping[str, str] | None = None) -> bool:
        """Return True if this provider can run in ``environment``."""
        ...

    def get_env_var_names(self) -> list[str]:
        """Environment variables the provider reads."""
        ...

    async def get_service_params(self, inputs: UploaderInputs) -> ServiceParams:
        """Resolve commit identity for ``inputs``."""
        ...
