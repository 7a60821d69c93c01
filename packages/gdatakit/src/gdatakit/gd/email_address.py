"""``<gd:email>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_property_missing
from gdatakit.gd.base import ContactDetail
from gdatakit.parser import get_property
from gdatakit.serializer import XMLBuilder


class EmailAddress(ContactDetail):
    element_name = "email"

    address: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.address = get_property(node, "address", required=True)

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if not self.address:
            raise required_property_missing("<gd:email>", "address", stage="serialize")
        builder.add_attribute("address", self.address)
