"""Preservation of child XML that no hook recognized.

``capture()`` serializes an unrecognized node and its whole subtree back to
text as it was read (attribute order, text, tails and nested elements
included) and separately collects every prefixed namespace binding in scope
anywhere in that subtree.  Namespaces inherited from ancestors are not
declared inside the fragment; the owning element declares them when it is
serialized, so the fragment can be re-emitted unchanged.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from lxml import etree

from gdatakit.serializer import escape_attribute

XML_NS = "http://www.w3.org/XML/1998/namespace"


def _element_name(element: etree._Element) -> str:
    localname = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{localname}"
    return localname


def _attribute_name(element: etree._Element, name: str) -> str:
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NS:
        return f"xml:{qname.localname}"
    for prefix, uri in element.nsmap.items():
        if prefix is not None and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _dump(element: etree._Element, inherited: dict[str | None, str], parts: list[str]) -> None:
    name = _element_name(element)
    parts.append(f"<{name}")

    nsmap = element.nsmap
    for prefix, uri in nsmap.items():
        if inherited.get(prefix) == uri:
            continue
        if prefix is None:
            parts.append(f" xmlns='{escape_attribute(uri)}'")
        else:
            parts.append(f" xmlns:{prefix}='{escape_attribute(uri)}'")

    for attr_name, value in element.attrib.items():
        parts.append(f" {_attribute_name(element, attr_name)}='{escape_attribute(value)}'")

    if element.text is None and len(element) == 0:
        parts.append("/>")
        return

    parts.append(">")
    _dump_content(element, nsmap, parts)
    parts.append(f"</{name}>")


def _dump_content(element: etree._Element, nsmap: dict[str | None, str], parts: list[str]) -> None:
    if element.text:
        parts.append(escape(element.text))
    for child in element:
        if isinstance(child.tag, str):
            _dump(child, nsmap, parts)
        else:
            # comments, processing instructions and entity references
            parts.append(etree.tostring(child, with_tail=False, encoding="unicode"))
        if child.tail:
            parts.append(escape(child.tail))


def dump_node(node: etree._Element) -> str:
    """Serialize *node* and its subtree without its inherited namespaces."""
    parent = node.getparent()
    inherited = dict(parent.nsmap) if parent is not None else {}
    parts: list[str] = []
    _dump(node, inherited, parts)
    return "".join(parts)


def scope_namespaces(node: etree._Element) -> dict[str, str]:
    """Collect the prefixed namespace bindings in scope across a subtree."""
    namespaces: dict[str, str] = {}
    for element in node.iter(tag=etree.Element):
        for prefix, uri in element.nsmap.items():
            if prefix is not None:
                namespaces.setdefault(prefix, uri)
    return namespaces


def capture(node: etree._Element) -> tuple[str, dict[str, str]]:
    """Return the verbatim XML of *node* and the namespaces it relies on."""
    return dump_node(node), scope_namespaces(node)


def dump_children(node: etree._Element) -> str:
    """Serialize the mixed content of *node* (text and child elements).

    Bindings *node* declares itself are re-declared on the children that
    need them, since *node*'s own opening tag is rebuilt by its owner.
    """
    parent = node.getparent()
    inherited = dict(parent.nsmap) if parent is not None else {}
    parts: list[str] = []
    _dump_content(node, inherited, parts)
    return "".join(parts)
