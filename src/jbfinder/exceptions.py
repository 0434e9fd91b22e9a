"""jbfinder exception hierarchy.

All public exceptions inherit from JBFinderError, giving callers a single
base class to catch when they want to handle any jbfinder failure without
swallowing unrelated errors.

Only conditions that abort an invocation are modelled here. Missing
vmoptions files, port files and install directories are not errors; they
surface as absent fields on the discovered record.
"""


class JBFinderError(Exception):
    """Base exception for all jbfinder errors."""


class DiscoveryError(JBFinderError):
    """Raised when a discovery scan cannot be completed."""


class BasePathError(DiscoveryError):
    """Raised when the JetBrains logs root cannot be determined.

    Happens when the home directory is unknown on macOS/Linux, or when
    ``LOCALAPPDATA`` is unset on Windows.
    """


class EnumerationError(DiscoveryError):
    """Raised when the logs root exists but cannot be listed.

    Covers permission errors and I/O faults while reading the directory.
    """


class ToolNotFoundError(JBFinderError):
    """Raised when no discovered instance has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No JetBrains IDE named '{name}' found")
        self.name = name
