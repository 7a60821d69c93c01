"""``<gd:phoneNumber>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_content_missing
from gdatakit.gd.base import ContactDetail
from gdatakit.parser import get_node_content, get_property
from gdatakit.serializer import XMLBuilder


class PhoneNumber(ContactDetail):
    """A phone number held as element text, with an optional ``tel:`` URI."""

    element_name = "phoneNumber"

    number: str | None = None
    uri: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        number = get_node_content(node)
        if number is None:
            raise required_content_missing(node)
        self.number = number
        self.uri = get_property(node, "uri")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("uri", self.uri)

    def get_xml(self, builder: XMLBuilder) -> None:
        if not self.number:
            raise required_content_missing("<gd:phoneNumber>", stage="serialize")
        builder.add_text(self.number)
