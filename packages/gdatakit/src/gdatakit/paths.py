"""Human-readable element locations for error messages.

``print_element()`` renders where a node sits in the parsed tree, with its
namespace prefix and the name of its parent, e.g. ``<author/name>`` or
``<media:group/media:credit>``.  Elements in the Atom namespace are printed
without a prefix since Atom is the default vocabulary of every document
this library reads.
"""

from __future__ import annotations

from lxml import etree

from gdatakit.namespaces import ATOM_NS


def _qualified_name(node: etree._Element) -> str:
    qname = etree.QName(node)
    if node.prefix is None or qname.namespace == ATOM_NS:
        return qname.localname
    return f"{node.prefix}:{qname.localname}"


def print_element(node: etree._Element) -> str:
    """Render the location of *node* as ``<parent/prefix:name>``."""
    parent = node.getparent()
    if parent is None:
        return f"<{_qualified_name(node)}>"
    return f"<{_qualified_name(parent)}/{_qualified_name(node)}>"


def print_expected(
    name: str,
    prefix: str | None = None,
    parent: etree._Element | str | None = None,
) -> str:
    """Render the location of an element that was never seen.

    *parent* may be the node the element was expected under, or its bare
    qualified name.
    """
    qualified = f"{prefix}:{name}" if prefix else name
    if parent is None:
        return f"<{qualified}>"
    if isinstance(parent, str):
        return f"<{parent}/{qualified}>"
    return f"<{_qualified_name(parent)}/{qualified}>"
