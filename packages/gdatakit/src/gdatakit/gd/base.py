"""Shared behaviour of the ``gd`` (Google Data) namespace element types."""

from __future__ import annotations

from lxml import etree

from gdatakit.namespaces import GD_NS
from gdatakit.parsable import Parsable
from gdatakit.parser import get_boolean_property, get_property
from gdatakit.serializer import XMLBuilder


class GDElement(Parsable):
    """Base for every element living in the ``gd`` namespace."""

    element_namespace = "gd"

    def get_namespaces(self) -> dict[str, str]:
        return {"gd": GD_NS}


class ContactDetail(GDElement):
    """A contact datum carrying the common ``rel``/``label``/``primary`` attributes.

    ``rel`` may be absent but not empty; ``primary`` must be ``true`` or
    ``false`` and defaults to false.
    """

    rel: str | None = None
    label: str | None = None
    primary: bool | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.rel = get_property(node, "rel", non_empty=True)
        self.label = get_property(node, "label")
        self.primary = get_boolean_property(node, "primary", default=False)

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("rel", self.rel)
        builder.add_attribute("label", self.label)
        builder.add_attribute("primary", bool(self.primary))
