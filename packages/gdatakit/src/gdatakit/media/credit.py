"""``<media:credit>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_content_missing
from gdatakit.media.base import MediaElement
from gdatakit.parser import get_node_content, get_property
from gdatakit.serializer import XMLBuilder

DEFAULT_SCHEME = "urn:ebu"


class MediaCredit(MediaElement):
    """An entity credited with creating the media.

    ``role`` is normalized to lower case.
    """

    element_name = "credit"

    credit: str | None = None
    scheme: str | None = None
    role: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        credit = get_node_content(node)
        if credit is None:
            raise required_content_missing(node)
        self.credit = credit
        self.scheme = get_property(node, "scheme", non_empty=True) or DEFAULT_SCHEME
        role = get_property(node, "role")
        self.role = role.lower() if role is not None else None

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("scheme", self.scheme)
        builder.add_attribute("role", self.role)

    def get_xml(self, builder: XMLBuilder) -> None:
        if not self.credit:
            raise required_content_missing("<media:credit>", stage="serialize")
        builder.add_text(self.credit)
