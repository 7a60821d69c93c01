"""Media RSS (``media``) element types."""

from gdatakit.media.base import MediaElement
from gdatakit.media.category import MediaCategory
from gdatakit.media.content import MediaContent, MediaExpression, MediaMedium
from gdatakit.media.credit import MediaCredit
from gdatakit.media.group import MediaGroup
from gdatakit.media.thumbnail import MediaThumbnail

__all__ = [
    "MediaCategory",
    "MediaContent",
    "MediaCredit",
    "MediaElement",
    "MediaExpression",
    "MediaGroup",
    "MediaMedium",
    "MediaThumbnail",
]
