"""Atom ``<generator>``: the agent that produced a feed."""

from __future__ import annotations

from lxml import etree

from gdatakit.parsable import Parsable
from gdatakit.parser import get_node_content, get_property
from gdatakit.serializer import XMLBuilder


class Generator(Parsable):
    element_name = "generator"

    name: str | None = None
    uri: str | None = None
    version: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.name = get_node_content(node)
        self.uri = get_property(node, "uri")
        self.version = get_property(node, "version")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("uri", self.uri)
        builder.add_attribute("version", self.version)

    def get_xml(self, builder: XMLBuilder) -> None:
        builder.add_text(self.name)
