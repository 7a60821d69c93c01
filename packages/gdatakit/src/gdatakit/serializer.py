"""Serialize engine: turns a parsable back into an XML fragment.

``serialize()`` mirrors the parse protocol.  Every ``pre_get_xml`` hook in
the class chain adds attributes to the opening tag (base class first), every
``get_xml`` hook adds content (base class first), and the object's preserved
``extra_xml`` is appended last, in its original order.  A root emission also
declares the namespaces aggregated by ``collect_namespaces()``.

Hooks write through an ``XMLBuilder`` so escaping is done in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from gdatakit.namespaces import ATOM_NS, collect_namespaces

if TYPE_CHECKING:
    from gdatakit.parsable import Parsable

_TEXT_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
    "\t": "&#9;",
    "\n": "&#10;",
    "\r": "&#13;",
}


def escape_text(value: str) -> str:
    """Escape the five XML metacharacters in element content."""
    return escape(value, _TEXT_ENTITIES)


def escape_attribute(value: str) -> str:
    """Escape an attribute value for a single- or double-quoted attribute.

    Whitespace control characters are written as character references so
    attribute-value normalization does not alter them on the way back in.
    """
    return escape(value, _ATTRIBUTE_ENTITIES)


class XMLBuilder:
    """Accumulates XML text on behalf of serialize hooks."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add_attribute(self, name: str, value: object | None) -> None:
        """Append `` name='value'``; ``None`` values are skipped."""
        if value is None:
            return
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._parts.append(f" {name}='{escape_attribute(str(value))}'")

    def add_text(self, value: str | None) -> None:
        if value:
            self._parts.append(escape_text(value))

    def add_element(
        self,
        name: str,
        text: object | None = None,
        attributes: dict[str, object | None] | None = None,
    ) -> None:
        """Append ``<name attr='v'>text</name>``, self-closing when empty."""
        self._parts.append(f"<{name}")
        for attr_name, attr_value in (attributes or {}).items():
            self.add_attribute(attr_name, attr_value)
        if text is None or text == "":
            self._parts.append("/>")
        else:
            self._parts.append(f">{escape_text(str(text))}</{name}>")

    def add_child(self, child: Parsable | None) -> None:
        """Append a nested parsable without re-declaring namespaces."""
        if child is not None:
            self._parts.append(serialize(child, declare_namespaces=False))

    def add_xml(self, fragment: str) -> None:
        """Append an already-serialized fragment verbatim."""
        self._parts.append(fragment)

    def getvalue(self) -> str:
        return "".join(self._parts)


def _declare(prefix: str, uri: str) -> str:
    return f" xmlns:{prefix}='{escape_attribute(uri)}'"


def serialize(parsable: Parsable, declare_namespaces: bool = True) -> str:
    """Build the XML representation of *parsable*.

    With *declare_namespaces* the output is a self-contained document
    element: it declares the default Atom namespace and every prefix the
    object, its ancestors' vocabularies and its preserved extra content use.
    Without it, the output is meant to be nested inside a larger tree and
    declares only the namespaces of its own extra content.
    """
    cls = type(parsable)
    if cls.element_name is None:
        raise TypeError(f"{cls.__name__} has no element name and cannot be serialized")

    if cls.element_namespace is not None:
        qname = f"{cls.element_namespace}:{cls.element_name}"
    else:
        qname = cls.element_name

    parts = [f"<{qname}"]
    if declare_namespaces:
        parts.append(f" xmlns='{ATOM_NS}'")
        namespaces = collect_namespaces(parsable)
    else:
        namespaces = parsable.extra_namespaces
    parts.extend(_declare(prefix, uri) for prefix, uri in namespaces.items())

    attributes = XMLBuilder()
    for hook in reversed(cls.hook_chain("pre_get_xml")):
        hook(parsable, attributes)
    parts.append(attributes.getvalue())

    content = XMLBuilder()
    for hook in reversed(cls.hook_chain("get_xml")):
        hook(parsable, content)
    for fragment in parsable.extra_xml:
        content.add_xml(fragment)

    body = content.getvalue()
    if body:
        parts.append(f">{body}</{qname}>")
    else:
        parts.append("/>")
    return "".join(parts)
