"""``<gd:im>``: an instant messaging address."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_property_missing
from gdatakit.gd.base import ContactDetail
from gdatakit.parser import get_property
from gdatakit.serializer import XMLBuilder

PROTOCOL_AIM = "http://schemas.google.com/g/2005#AIM"
PROTOCOL_MSN = "http://schemas.google.com/g/2005#MSN"
PROTOCOL_YAHOO = "http://schemas.google.com/g/2005#YAHOO"
PROTOCOL_SKYPE = "http://schemas.google.com/g/2005#SKYPE"
PROTOCOL_QQ = "http://schemas.google.com/g/2005#QQ"
PROTOCOL_GOOGLE_TALK = "http://schemas.google.com/g/2005#GOOGLE_TALK"
PROTOCOL_ICQ = "http://schemas.google.com/g/2005#ICQ"
PROTOCOL_JABBER = "http://schemas.google.com/g/2005#JABBER"


class IMAddress(ContactDetail):
    element_name = "im"

    address: str | None = None
    protocol: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.address = get_property(node, "address", required=True)
        self.protocol = get_property(node, "protocol", non_empty=True)

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if not self.address:
            raise required_property_missing("<gd:im>", "address", stage="serialize")
        builder.add_attribute("address", self.address)
        builder.add_attribute("protocol", self.protocol)
