"""gdatakit -- hook-driven XML parsing and serialization for GData/Atom.

Public API re-exports for convenient access.
"""

from gdatakit.atom import Author, Category, Generator, Link
from gdatakit.config import ParserConfig
from gdatakit.entry import Entry
from gdatakit.errors import ErrorCode, GDataError, ParserError
from gdatakit.extra import capture
from gdatakit.feed import Feed
from gdatakit.gd import (
    EmailAddress,
    IMAddress,
    Organization,
    PhoneNumber,
    PostalAddress,
    Reminder,
    When,
    Where,
    Who,
)
from gdatakit.media import (
    MediaCategory,
    MediaContent,
    MediaCredit,
    MediaExpression,
    MediaGroup,
    MediaMedium,
    MediaThumbnail,
)
from gdatakit.namespaces import collect_namespaces
from gdatakit.parsable import Parsable
from gdatakit.parser import parse_document, parse_node
from gdatakit.paths import print_element
from gdatakit.security import DocumentScanner
from gdatakit.serializer import XMLBuilder, serialize
from gdatakit.timestamps import Timestamp

__all__ = [
    "Parsable",
    "ParserConfig",
    "ErrorCode",
    "GDataError",
    "ParserError",
    "DocumentScanner",
    "XMLBuilder",
    "Timestamp",
    "parse_document",
    "parse_node",
    "serialize",
    "collect_namespaces",
    "capture",
    "print_element",
    "Author",
    "Category",
    "Generator",
    "Link",
    "Entry",
    "Feed",
    "EmailAddress",
    "IMAddress",
    "Organization",
    "PhoneNumber",
    "PostalAddress",
    "Reminder",
    "When",
    "Where",
    "Who",
    "MediaCategory",
    "MediaContent",
    "MediaCredit",
    "MediaExpression",
    "MediaGroup",
    "MediaMedium",
    "MediaThumbnail",
]
