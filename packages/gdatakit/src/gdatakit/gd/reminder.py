"""``<gd:reminder>``: when to alert the user about an event.

A reminder is either absolute (``absoluteTime``) or relative to the event
start, given in ``days``, ``hours`` or ``minutes``.  Relative offsets are
normalized to minutes and always written back as ``minutes``.
"""

from __future__ import annotations

from lxml import etree

from gdatakit.gd.base import GDElement
from gdatakit.parser import get_integer_property, get_property
from gdatakit.serializer import XMLBuilder
from gdatakit.timestamps import Timestamp, parse_timestamp

METHOD_ALERT = "alert"
METHOD_EMAIL = "email"
METHOD_SMS = "sms"

_UNIT_MINUTES = (("days", 60 * 24), ("hours", 60), ("minutes", 1))


class Reminder(GDElement):
    element_name = "reminder"

    absolute_time: Timestamp | None = None
    relative_minutes: int | None = None
    method: str | None = None

    @property
    def is_absolute(self) -> bool:
        return self.absolute_time is not None

    def pre_parse_xml(self, node: etree._Element) -> None:
        absolute_time = node.get("absoluteTime")
        if absolute_time is not None:
            self.absolute_time = parse_timestamp(node, absolute_time, "absoluteTime")
        else:
            for unit, factor in _UNIT_MINUTES:
                value = get_integer_property(node, unit)
                if value is not None:
                    self.relative_minutes = value * factor
                    break
        self.method = get_property(node, "method")

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if self.absolute_time is not None:
            builder.add_attribute("absoluteTime", self.absolute_time)
        else:
            builder.add_attribute("minutes", self.relative_minutes)
        builder.add_attribute("method", self.method)
