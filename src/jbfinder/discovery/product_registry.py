"""Static registry of JetBrains product families.

Log and config directories are named ``<Product><Version>`` (for example
``IntelliJIdea2024.3`` or ``PyCharmCE2023.2``). Install directories and
vmoptions files are not versioned, so each raw directory name is mapped to
a ``ProductIdentity``: the display name used for the install directory
and the short code used as the ``<code>.vmoptions`` file prefix.

Matching is a case-sensitive prefix test against ``PRODUCT_FAMILIES`` in
order; the first match wins. Where one prefix extends another (``PyCharmCE``
and ``PyCharm``) the longer prefix must come first.

Unrecognized names map to themselves. The short code is then the raw name
with its casing untouched, unlike recognized families whose codes are
lower-case.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductIdentity:
    """Canonical identity of a JetBrains product.

    Attributes:
        display_name: Name of the install directory (e.g., "IntelliJ IDEA").
        code: Prefix of the vmoptions file (e.g., "idea").
    """

    display_name: str
    code: str


@dataclass(frozen=True)
class ProductFamily:
    """A known product family, recognized by its directory-name prefix."""

    prefix: str
    identity: ProductIdentity


def _family(prefix: str, display_name: str, code: str) -> ProductFamily:
    return ProductFamily(prefix=prefix, identity=ProductIdentity(display_name, code.lower()))


# Module-level constant: ordered table of known product families.
PRODUCT_FAMILIES: list[ProductFamily] = [
    _family("IntelliJIdea", "IntelliJ IDEA", "idea"),
    _family("IdeaIC", "IntelliJ IDEA CE", "idea"),
    _family("PyCharmCE", "PyCharm CE", "pycharm"),
    _family("PyCharm", "PyCharm", "pycharm"),
    _family("WebStorm", "WebStorm", "webstorm"),
    _family("PhpStorm", "PhpStorm", "phpstorm"),
    _family("GoLand", "GoLand", "goland"),
    _family("CLion", "CLion", "clion"),
    _family("Rider", "Rider", "rider"),
    _family("DataGrip", "DataGrip", "datagrip"),
    _family("RubyMine", "RubyMine", "rubymine"),
    _family("RustRover", "RustRover", "rustrover"),
    _family("DataSpell", "DataSpell", "dataspell"),
    _family("AppCode", "AppCode", "appcode"),
    _family("Aqua", "Aqua", "aqua"),
    _family("Writerside", "Writerside", "writerside"),
    _family("AndroidStudio", "Android Studio", "studio"),
]


def normalize_product_name(raw_name: str) -> ProductIdentity:
    """Map a raw directory name to its product identity.

    Args:
        raw_name: Directory name such as ``GoLand2024.3``.

    Returns:
        The first matching family's identity, or ``ProductIdentity(raw_name,
        raw_name)`` when no family matches.
    """
    for family in PRODUCT_FAMILIES:
        if raw_name.startswith(family.prefix):
            return family.identity
    return ProductIdentity(display_name=raw_name, code=raw_name)
