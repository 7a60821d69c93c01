"""``<media:category>``."""

from __future__ import annotations

from lxml import etree

from gdatakit.errors import required_content_missing
from gdatakit.media.base import MediaElement
from gdatakit.parser import get_node_content, get_property
from gdatakit.serializer import XMLBuilder

DEFAULT_SCHEME = "http://video.search.yahoo.com/mrss/category_schema"


class MediaCategory(MediaElement):
    """A category the media belongs to; the category text itself is mandatory."""

    element_name = "category"

    category: str | None = None
    scheme: str | None = None
    label: str | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        category = get_node_content(node)
        if category is None:
            raise required_content_missing(node)
        self.category = category
        self.scheme = get_property(node, "scheme", non_empty=True) or DEFAULT_SCHEME
        self.label = get_property(node, "label")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("scheme", self.scheme)
        builder.add_attribute("label", self.label)

    def get_xml(self, builder: XMLBuilder) -> None:
        if not self.category:
            raise required_content_missing("<media:category>", stage="serialize")
        builder.add_text(self.category)
