"""Qualified identifier parsing.

Identifiers come in two forms:
- Hierarchical: segments joined by the hierarchy separator (App.Model.User)
- Legacy flat: segments joined by the legacy separator (App_Model_User)

Parsing is a two-stage pipeline. normalize_identifier() strips the input and
rewrites a legacy flat identifier into the hierarchical form; split_identifier()
then divides the result at the last hierarchy separator. The flat-vs-hierarchical
decision is made once for the whole identifier: as soon as one hierarchy
separator is present, legacy separators inside segments are kept as they are.
"""

from dataclasses import dataclass
from string import whitespace

DEFAULT_SEPARATOR = "."
DEFAULT_LEGACY_SEPARATOR = "_"


@dataclass(frozen=True)
class QualifiedName:
    """A parsed identifier.

    Attributes:
        segments: Namespace segments, top-level first (may be empty)
        simple_name: Final segment (the class or module name)
        raw: Stripped identifier as given, before any legacy rewrite
        separator: Hierarchy separator the identifier was parsed with
    """

    segments: tuple[str, ...]
    simple_name: str
    raw: str
    separator: str = DEFAULT_SEPARATOR

    @property
    def top_level(self) -> str | None:
        """Top-level namespace, or None for an identifier without namespace."""
        return self.segments[0] if self.segments else None

    @property
    def module_name(self) -> str:
        """Dotted module name the loaded source is registered under."""
        return self.raw.replace(self.separator, ".")


def is_legacy_identifier(
    identifier: str,
    separator: str = DEFAULT_SEPARATOR,
    legacy_separator: str | None = DEFAULT_LEGACY_SEPARATOR,
) -> bool:
    """Check whether a stripped identifier uses the legacy flat convention."""
    if not legacy_separator:
        return False
    return separator not in identifier and legacy_separator in identifier


def normalize_identifier(
    identifier: str | None,
    separator: str = DEFAULT_SEPARATOR,
    legacy_separator: str | None = DEFAULT_LEGACY_SEPARATOR,
) -> tuple[str, str]:
    """Strip an identifier and rewrite the legacy flat form.

    Returns:
        Tuple of (stripped, normalized). stripped is the input without
        surrounding whitespace or separators; normalized additionally has
        legacy separators rewritten when the identifier is legacy flat.
    """
    stripped = (identifier or "").strip(separator + whitespace)
    if is_legacy_identifier(stripped, separator, legacy_separator):
        return stripped, stripped.replace(legacy_separator, separator)
    return stripped, stripped


def split_identifier(normalized: str, separator: str = DEFAULT_SEPARATOR) -> tuple[tuple[str, ...], str]:
    """Split a normalized identifier at its last hierarchy separator."""
    namespace, sep, simple_name = normalized.rpartition(separator)
    if not sep:
        return (), normalized
    return tuple(namespace.split(separator)), simple_name


def parse_identifier(
    identifier: str | None,
    separator: str = DEFAULT_SEPARATOR,
    legacy_separator: str | None = DEFAULT_LEGACY_SEPARATOR,
) -> QualifiedName | None:
    """Parse an identifier into a QualifiedName.

    Returns:
        QualifiedName, or None for a malformed identifier (empty after
        stripping, containing an empty segment, or with a simple name whose
        legacy separators leave an empty directory or file name)
    """
    stripped, normalized = normalize_identifier(identifier, separator, legacy_separator)
    if not normalized:
        return None

    segments, simple_name = split_identifier(normalized, separator)
    if not simple_name or any(not segment for segment in segments):
        return None

    # App._private and App.private would otherwise map to the same file
    if legacy_separator and any(not piece for piece in simple_name.split(legacy_separator)):
        return None

    return QualifiedName(segments=segments, simple_name=simple_name, raw=stripped, separator=separator)
