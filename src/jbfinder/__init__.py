"""jbfinder: Read-only discovery of installed JetBrains IDEs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
