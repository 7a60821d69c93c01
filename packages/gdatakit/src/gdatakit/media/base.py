"""Shared behaviour of the Media RSS element types."""

from __future__ import annotations

from gdatakit.namespaces import MEDIA_NS
from gdatakit.parsable import Parsable


class MediaElement(Parsable):
    """Base for every element living in the ``media`` namespace."""

    element_namespace = "media"

    def get_namespaces(self) -> dict[str, str]:
        return {"media": MEDIA_NS}
