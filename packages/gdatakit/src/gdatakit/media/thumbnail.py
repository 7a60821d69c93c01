"""``<media:thumbnail>``."""

from __future__ import annotations

import re

from lxml import etree

from gdatakit.errors import required_property_missing, unknown_property_value
from gdatakit.media.base import MediaElement
from gdatakit.parser import get_integer_property, get_property
from gdatakit.serializer import XMLBuilder

_TIME_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2}(?:\.\d+)?)$")


def parse_time(value: str) -> int | None:
    """Convert an ``HH:MM:SS(.fff)`` offset into milliseconds.

    Returns None if *value* is not in that form.
    """
    match = _TIME_RE.match(value)
    if match is None:
        return None
    hours, minutes, seconds = match.groups()
    return round((float(seconds) + int(minutes) * 60 + int(hours) * 3600) * 1000)


def format_time(milliseconds: int) -> str:
    """Render milliseconds as ``HH:MM:SS``, with ``.fff`` when non-zero."""
    seconds, millis = divmod(milliseconds, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    rendered = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if millis:
        rendered += f".{millis:03d}"
    return rendered


class MediaThumbnail(MediaElement):
    """A preview image; ``time`` is its offset into the media in milliseconds."""

    element_name = "thumbnail"

    url: str | None = None
    width: int | None = None
    height: int | None = None
    time: int | None = None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.url = get_property(node, "url", required=True)
        self.width = get_integer_property(node, "width")
        self.height = get_integer_property(node, "height")

        time = node.get("time")
        if time is not None:
            milliseconds = parse_time(time)
            if milliseconds is None:
                raise unknown_property_value(node, "time", time)
            self.time = milliseconds

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if not self.url:
            raise required_property_missing("<media:thumbnail>", "url", stage="serialize")
        builder.add_attribute("url", self.url)
        builder.add_attribute("height", self.height)
        builder.add_attribute("width", self.width)
        if self.time is not None:
            builder.add_attribute("time", format_time(self.time))
