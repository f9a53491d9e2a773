"""CI providers for the coverage uploader.

Providers are consulted in registry order; the local git provider is
registered last and acts as the fallback when no hosted CI is detected.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from coverage_uploader.errors import ProviderNotFound
from coverage_uploader.providers.base import Provider
from coverage_uploader.providers.local import LocalProvider
from coverage_uploader.types import UploaderInputs

logger = logging.getLogger(__name__)

# Registry of provider factories in priority order (first match wins)
PROVIDER_REGISTRY: dict[str, Callable[[], Provider]] = {
    "local": LocalProvider,
}


def get_providers() -> list[Provider]:
    """Instantiate every registered provider in priority order."""
    return [factory() for factory in PROVIDER_REGISTRY.values()]


def detect_provider(
    inputs: UploaderInputs,
    providers: Sequence[Provider] | None = None,
) -> Provider:
    """Return the first provider that detects a usable environment.

    Args:
        inputs: Overrides and environment for this upload
        providers: Candidate providers (defaults to the registry)

    Returns:
        The selected provider

    Raises:
        ProviderNotFound: If no provider applies
    """
    candidates = list(providers) if providers is not None else get_providers()
    for provider in candidates:
        if provider.detect(inputs.environment):
            logger.info("Detected %s as the CI provider", provider.name)
            return provider
        logger.debug("Provider %s not detected", provider.name)
    raise ProviderNotFound([p.name for p in candidates])


__all__ = [
    "PROVIDER_REGISTRY",
    "LocalProvider",
    "Provider",
    "detect_provider",
    "get_providers",
]
