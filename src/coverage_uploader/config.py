"""Uploader configuration management"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from coverage_uploader.constants import DEFAULT_GIT_EXECUTABLE, SPAWN_PROCESS_BUFFER_SIZE
from coverage_uploader.helpers.process import CommandRunner, git_runner

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".coverage-uploader" / "config.toml"


class UploaderConfig:
    """Manage uploader configuration"""

    def __init__(self, config_file: Path | None = None) -> None:
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        self._git_section: dict[str, Any] | None = None

    def _load_git_section(self) -> dict[str, Any]:
        if self._git_section is not None:
            return self._git_section

        section: dict[str, Any] = {}
        if self.config_file.exists():
            try:
                config: dict[str, Any] = toml.load(self.config_file)
            except (toml.TomlDecodeError, OSError) as e:
                logger.warning("Invalid %s; using defaults: %s", self.config_file, e)
                config = {}
            git_section = config.get("git")
            if isinstance(git_section, dict):
                section = git_section
        self._git_section = section
        return section

    def get_git_executable(self) -> str:
        """Get git executable from config"""
        executable = self._load_git_section().get("executable")
        if isinstance(executable, str) and executable.strip():
            return executable.strip()
        return DEFAULT_GIT_EXECUTABLE

    def get_max_buffer(self) -> int:
        """Get the subprocess stdout cap in bytes from config"""
        max_buffer = self._load_git_section().get("max_buffer")
        # bool is an int subclass
        if isinstance(max_buffer, int) and not isinstance(max_buffer, bool) and max_buffer > 0:
            return max_buffer
        return SPAWN_PROCESS_BUFFER_SIZE

    def git_runner(self, cwd: Path | None = None) -> CommandRunner:
        """Build a CommandRunner using the configured executable and buffer."""
        return git_runner(self.get_git_executable(), self.get_max_buffer(), cwd=cwd)
