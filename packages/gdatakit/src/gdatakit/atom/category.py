"""Atom ``<category>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_property_missing
from gdatakit.parsable import Parsable
from gdatakit.parser import get_property
from gdatakit.serializer import XMLBuilder


class Category(Parsable):
    """A category an entry or feed belongs to, identified by ``term``."""

    element_name = "category"

    term: str | None = None
    scheme: str | None = None
    label: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.term = get_property(node, "term", required=True)
        self.scheme = get_property(node, "scheme")
        self.label = get_property(node, "label")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if not self.term:
            raise required_property_missing("<category>", "term", stage="serialize")
        builder.add_attribute("term", self.term)
        builder.add_attribute("scheme", self.scheme)
        builder.add_attribute("label", self.label)
