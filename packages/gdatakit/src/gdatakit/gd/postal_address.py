"""``<gd:postalAddress>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_content_missing
from gdatakit.gd.base import ContactDetail
from gdatakit.parser import get_node_content
from gdatakit.serializer import XMLBuilder


class PostalAddress(ContactDetail):
    element_name = "postalAddress"

    address: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        address = get_node_content(node)
        if address is None:
            raise required_content_missing(node)
        self.address = address

    def get_xml(self, builder: XMLBuilder) -> None:
        if not self.address:
            raise required_content_missing("<gd:postalAddress>", stage="serialize")
        builder.add_text(self.address)
