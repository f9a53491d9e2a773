"""Shared constants for the coverage uploader."""

# Upper bound on captured stdout for any spawned helper process (100 MiB).
SPAWN_PROCESS_BUFFER_SIZE = 1_048_576 * 100

DEFAULT_GIT_EXECUTABLE = "git"
