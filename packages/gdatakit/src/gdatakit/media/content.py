"""``<media:content>``: one rendition of a media object."""

from __future__ import annotations

from enum import Enum

from lxml import etree

from gdatakit.errors import required_property_missing
from gdatakit.media.base import MediaElement
from gdatakit.parser import get_boolean_property, get_enum_property, get_integer_property, get_property
from gdatakit.serializer import XMLBuilder


class MediaExpression(str, Enum):
    """Whether the object is a sample or the full version."""

    FULL = "full"
    SAMPLE = "sample"
    NONSTOP = "nonstop"


class MediaMedium(str, Enum):
    """The type of object the content refers to."""

    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"
    EXECUTABLE = "executable"


_EXPRESSIONS = {member.value: member for member in MediaExpression}
_MEDIA = {member.value: member for member in MediaMedium}


class MediaContent(MediaElement):
    """A media file reference.

    ``duration`` is in seconds and ``file_size`` in bytes.  ``medium`` is
    None when the document does not say.
    """

    element_name = "content"

    url: str | None = None
    type: str | None = None
    is_default: bool | None = None
    expression: MediaExpression | None = None
    medium: MediaMedium | None = None
    duration: int | None = None
    file_size: int | None = None
    height: int | None = None
    width: int | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.url = get_property(node, "url", non_empty=True)
        self.type = get_property(node, "type")
        self.is_default = get_boolean_property(node, "isDefault", default=False)
        self.expression = get_enum_property(node, "expression", _EXPRESSIONS, MediaExpression.FULL)
        self.medium = get_enum_property(node, "medium", _MEDIA, None)
        self.duration = get_integer_property(node, "duration")
        self.file_size = get_integer_property(node, "fileSize")
        self.height = get_integer_property(node, "height")
        self.width = get_integer_property(node, "width")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if self.url == "":
            raise required_property_missing("<media:content>", "url", stage="serialize")
        builder.add_attribute("url", self.url)
        builder.add_attribute("type", self.type)
        if self.is_default:
            builder.add_attribute("isDefault", True)
        if self.expression is not None:
            builder.add_attribute("expression", self.expression.value)
        if self.medium is not None:
            builder.add_attribute("medium", self.medium.value)
        builder.add_attribute("duration", self.duration)
        builder.add_attribute("fileSize", self.file_size)
        builder.add_attribute("height", self.height)
        builder.add_attribute("width", self.width)
