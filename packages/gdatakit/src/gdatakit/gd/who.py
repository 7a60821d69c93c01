"""``<gd:who>``: a person associated with the containing entity."""

from __future__ import annotations

from lxml import etree

from gdatakit.gd.base import GDElement
from gdatakit.parser import get_property
from gdatakit.serializer import XMLBuilder

REL_EVENT_ATTENDEE = "http://schemas.google.com/g/2005#event.attendee"
REL_EVENT_ORGANIZER = "http://schemas.google.com/g/2005#event.organizer"
REL_EVENT_PERFORMER = "http://schemas.google.com/g/2005#event.performer"
REL_EVENT_SPEAKER = "http://schemas.google.com/g/2005#event.speaker"


class Who(GDElement):
    element_name = "who"

    rel: str | None = None
    email: str | None = None
    value_string: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.rel = get_property(node, "rel", non_empty=True)
        self.email = get_property(node, "email", non_empty=True)
        self.value_string = get_property(node, "valueString")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("email", self.email)
        builder.add_attribute("rel", self.rel)
        builder.add_attribute("valueString", self.value_string)
