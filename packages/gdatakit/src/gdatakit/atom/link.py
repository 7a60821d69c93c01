"""Atom ``<link>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_property_missing
from gdatakit.parsable import Parsable
from gdatakit.parser import get_integer_property, get_property
from gdatakit.serializer import XMLBuilder

REL_ALTERNATE = "alternate"
REL_SELF = "self"
REL_EDIT = "edit"
REL_RELATED = "related"
REL_ENCLOSURE = "enclosure"
REL_VIA = "via"


class Link(Parsable):
    """A reference from an entry or feed to a web resource.

    ``href`` is mandatory.  ``rel`` defaults to ``alternate`` when absent;
    ``rel``, ``type`` and ``hreflang`` may not be present-but-empty.
    """

    element_name = "link"

    href: str | None = None
    rel: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: int | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.href = get_property(node, "href", required=True)
        self.rel = get_property(node, "rel", non_empty=True) or REL_ALTERNATE
        self.type = get_property(node, "type", non_empty=True)
        self.hreflang = get_property(node, "hreflang", non_empty=True)
        self.title = get_property(node, "title")
        self.length = get_integer_property(node, "length")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if not self.href:
            raise required_property_missing("<link>", "href", stage="serialize")
        builder.add_attribute("href", self.href)
        builder.add_attribute("title", self.title)
        builder.add_attribute("rel", self.rel)
        builder.add_attribute("type", self.type)
        builder.add_attribute("hreflang", self.hreflang)
        builder.add_attribute("length", self.length)
