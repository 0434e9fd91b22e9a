"""Discovery of installed JetBrains IDEs.

Scans the platform's JetBrains logs root, resolves each versioned product
directory into an ``InstalledInstance`` and reads its VM options and
Toolbox notification port.

Public API::

    from jbfinder.discovery import IDEScanner, list_installations

    scanner = IDEScanner()
    for ide in list_installations(scanner.find_installations()):
        print(f"{ide.name}: {ide.install_dir}")
"""

from __future__ import annotations

from jbfinder.discovery.ide_scanner import IDEScanner, get_installation, list_installations
from jbfinder.discovery.models import DiscoveryCandidate, InstalledInstance
from jbfinder.discovery.platforms import (
    HostEnvironment,
    LinuxProfile,
    MacOSProfile,
    OverrideProfile,
    PlatformProfile,
    WindowsProfile,
    current_profile,
)
from jbfinder.discovery.product_registry import (
    PRODUCT_FAMILIES,
    ProductIdentity,
    normalize_product_name,
)

__all__ = [
    "DiscoveryCandidate",
    "HostEnvironment",
    "IDEScanner",
    "InstalledInstance",
    "LinuxProfile",
    "MacOSProfile",
    "OverrideProfile",
    "PRODUCT_FAMILIES",
    "PlatformProfile",
    "ProductIdentity",
    "WindowsProfile",
    "current_profile",
    "get_installation",
    "list_installations",
    "normalize_product_name",
]
