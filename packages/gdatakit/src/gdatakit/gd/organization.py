"""``<gd:organization>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import duplicate_element
from gdatakit.gd.base import ContactDetail
from gdatakit.namespaces import GD_NS
from gdatakit.parser import get_node_content, is_element
from gdatakit.serializer import XMLBuilder


class Organization(ContactDetail):
    """An organization a contact belongs to, with optional name and job title."""

    element_name = "organization"

    name: str | None = None
    title: str | None = None

    def parse_xml(self, node: etree._Element) -> bool:
        if is_element(node, GD_NS, "orgName"):
            if self.name is not None:
                raise duplicate_element(node)
            self.name = get_node_content(node) or ""
        elif is_element(node, GD_NS, "orgTitle"):
            if self.title is not None:
                raise duplicate_element(node)
            self.title = get_node_content(node) or ""
        else:
            return False
        return True

    def get_xml(self, builder: XMLBuilder) -> None:
        if self.name is not None:
            builder.add_element("gd:orgName", self.name)
        if self.title is not None:
            builder.add_element("gd:orgTitle", self.title)
