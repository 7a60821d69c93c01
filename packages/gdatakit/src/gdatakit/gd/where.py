"""``<gd:where>``: a place, such as an event location."""

from __future__ import annotations

from lxml import etree

from gdatakit.gd.base import GDElement
from gdatakit.parser import get_property
from gdatakit.serializer import XMLBuilder

REL_EVENT = "http://schemas.google.com/g/2005#event"
REL_EVENT_ALTERNATE = "http://schemas.google.com/g/2005#event.alternate"
REL_EVENT_PARKING = "http://schemas.google.com/g/2005#event.parking"


class Where(GDElement):
    element_name = "where"

    rel: str | None = None
    label: str | None = None
    value_string: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.rel = get_property(node, "rel", non_empty=True)
        self.label = get_property(node, "label")
        self.value_string = get_property(node, "valueString")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("label", self.label)
        builder.add_attribute("rel", self.rel)
        builder.add_attribute("valueString", self.value_string)
