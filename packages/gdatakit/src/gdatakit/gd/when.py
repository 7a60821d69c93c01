"""``<gd:when>``: a period of time, optionally with reminders."""

from __future__ import annotations

from lxml import etree
from pydantic import Field

from gdatakit.errors import not_iso8601_format, required_property_missing
from gdatakit.gd.base import GDElement
from gdatakit.gd.reminder import Reminder
from gdatakit.namespaces import GD_NS
from gdatakit.parser import get_property, is_element
from gdatakit.serializer import XMLBuilder
from gdatakit.timestamps import Timestamp, parse_timestamp


class When(GDElement):
    """A start time and optional end time.

    The start time may be a calendar date (an all-day period) or a full
    date-time; the end time, when present, must be of the same kind.
    """

    element_name = "when"

    start_time: Timestamp | None = None
    end_time: Timestamp | None = None
    value_string: str | None = None
    reminders: list[Reminder] = Field(default_factory=list)

    @property
    def is_date(self) -> bool:
        return self.start_time is not None and self.start_time.is_date

    def pre_parse_xml(self, node: etree._Element) -> None:
        start_time = node.get("startTime")
        if start_time is None:
            raise required_property_missing(node, "startTime")
        self.start_time = parse_timestamp(node, start_time, "startTime", allow_date=True)

        end_time = node.get("endTime")
        if end_time is not None:
            end = parse_timestamp(node, end_time, "endTime", allow_date=True)
            if end.is_date != self.start_time.is_date:
                raise not_iso8601_format(node, end_time, "endTime")
            self.end_time = end

        self.value_string = get_property(node, "valueString")

    def parse_xml(self, node: etree._Element) -> bool:
        if is_element(node, GD_NS, "reminder"):
            self.reminders.append(Reminder.from_xml_node(node))
            return True
        return False

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        if self.start_time is None:
            raise required_property_missing("<gd:when>", "startTime", stage="serialize")
        builder.add_attribute("startTime", self.start_time)
        builder.add_attribute("endTime", self.end_time)
        builder.add_attribute("valueString", self.value_string)

    def get_xml(self, builder: XMLBuilder) -> None:
        for reminder in self.reminders:
            builder.add_child(reminder)
