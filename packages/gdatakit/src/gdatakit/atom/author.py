"""Atom person construct: ``<author>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import duplicate_element, required_content_missing, required_element_missing
from gdatakit.namespaces import ATOM_NS
from gdatakit.parsable import Parsable
from gdatakit.parser import get_node_content, is_element
from gdatakit.paths import print_expected
from gdatakit.serializer import XMLBuilder


class Author(Parsable):
    """A person credited with an entry or feed.

    ``name`` is mandatory; ``uri`` and ``email`` are optional singletons.
    """

    element_name = "author"

    name: str | None = None
    uri: str | None = None
    email: str | None = None

    def parse_xml(self, node: etree._Element) -> bool:
        if is_element(node, ATOM_NS, "name"):
            if self.name is not None:
                raise duplicate_element(node)
            name = get_node_content(node)
            if name is None:
                raise required_content_missing(node)
            self.name = name
        elif is_element(node, ATOM_NS, "uri"):
            if self.uri is not None:
                raise duplicate_element(node)
            self.uri = get_node_content(node) or ""
        elif is_element(node, ATOM_NS, "email"):
            if self.email is not None:
                raise duplicate_element(node)
            self.email = get_node_content(node) or ""
        else:
            return False
        return True

    def post_parse_xml(self) -> None:
        if not self.name:
            raise required_element_missing(print_expected("name", parent="author"))

    def get_xml(self, builder: XMLBuilder) -> None:
        if not self.name:
            raise required_element_missing(print_expected("name", parent="author"), stage="serialize")
        builder.add_element("name", self.name)
        if self.uri is not None:
            builder.add_element("uri", self.uri)
        if self.email is not None:
            builder.add_element("email", self.email)
