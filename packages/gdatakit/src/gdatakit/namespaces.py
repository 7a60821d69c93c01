"""XML vocabularies known to gdatakit and namespace aggregation.

``collect_namespaces()`` walks a parsable's class chain from the
most-derived type up to ``Parsable``, merging every ``get_namespaces`` hook
result, then merges the namespaces introduced by the object's preserved
extra content.  The first binding seen for a prefix wins, so a subtype's
binding shadows its ancestors'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gdatakit.parsable import Parsable

ATOM_NS = "http://www.w3.org/2005/Atom"
GD_NS = "http://schemas.google.com/g/2005"
MEDIA_NS = "http://video.search.yahoo.com/mrss"
OPENSEARCH_NS = "http://a9.com/-/spec/opensearch/1.1/"
APP_NS = "http://www.w3.org/2007/app"

KNOWN_NAMESPACES: dict[str, str] = {
    "gd": GD_NS,
    "media": MEDIA_NS,
    "openSearch": OPENSEARCH_NS,
    "app": APP_NS,
}


def namespace_for_prefix(
    prefix: str | None,
    bindings: dict[str, str] | None = None,
) -> str | None:
    """Return the URI bound to *prefix*; ``None`` means Atom.

    *bindings* (typically a type's aggregated namespaces) take precedence
    over the built-in vocabularies.  Returns None for an unbound prefix.
    """
    if prefix is None:
        return ATOM_NS
    if bindings and prefix in bindings:
        return bindings[prefix]
    return KNOWN_NAMESPACES.get(prefix)


def merge_namespaces(target: dict[str, str], source: dict[str, str]) -> dict[str, str]:
    """Add bindings from *source* whose prefix *target* does not bind yet."""
    for prefix, uri in source.items():
        target.setdefault(prefix, uri)
    return target


def collect_namespaces(parsable: Parsable) -> dict[str, str]:
    """Aggregate the prefix→URI bindings used by *parsable*'s XML.

    Hook results are merged most-derived first, then the object's
    ``extra_namespaces``.  The returned dict is freshly built.
    """
    namespaces: dict[str, str] = {}
    for hook in type(parsable).hook_chain("get_namespaces"):
        merge_namespaces(namespaces, hook(parsable) or {})
    return merge_namespaces(namespaces, parsable.extra_namespaces)
