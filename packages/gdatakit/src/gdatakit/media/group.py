"""``<media:group>``: the Media RSS description attached to an entry."""

from __future__ import annotations

from lxml import etree
from pydantic import Field

from gdatakit.errors import duplicate_element, unknown_property_value
from gdatakit.media.base import MediaElement
from gdatakit.media.category import MediaCategory
from gdatakit.media.content import MediaContent
from gdatakit.media.credit import MediaCredit
from gdatakit.media.thumbnail import MediaThumbnail
from gdatakit.namespaces import MEDIA_NS, collect_namespaces, merge_namespaces
from gdatakit.parser import get_node_content, get_property, is_element
from gdatakit.serializer import XMLBuilder

_RELATIONSHIPS = {"allow": False, "deny": True}


class MediaGroup(MediaElement):
    """Title, description, renditions and availability of a media object.

    ``restricted_countries`` maps ISO country codes (and the special key
    ``all``) to whether viewing is restricted there.  It is built from
    ``media:rating`` and ``media:restriction`` elements and written back
    as a single restriction when ``all`` is known, otherwise as the
    ``country`` list of the rating.  ``rating`` and ``rating_scheme`` hold
    the text and scheme of the last ``media:rating``.
    """

    element_name = "group"

    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    category: MediaCategory | None = None
    contents: list[MediaContent] = Field(default_factory=list)
    credit: MediaCredit | None = None
    player_url: str | None = None
    rating: str | None = None
    rating_scheme: str | None = None
    restricted_countries: dict[str, bool] = Field(default_factory=dict)
    thumbnails: list[MediaThumbnail] = Field(default_factory=list)

    def parse_xml(self, node: etree._Element) -> bool:
        if is_element(node, MEDIA_NS, "title"):
            self.title = get_node_content(node)
        elif is_element(node, MEDIA_NS, "description"):
            self.description = get_node_content(node)
        elif is_element(node, MEDIA_NS, "keywords"):
            self.keywords = get_node_content(node)
        elif is_element(node, MEDIA_NS, "category"):
            self.category = MediaCategory.from_xml_node(node)
        elif is_element(node, MEDIA_NS, "content"):
            self.contents.append(MediaContent.from_xml_node(node))
        elif is_element(node, MEDIA_NS, "credit"):
            if self.credit is not None:
                raise duplicate_element(node)
            self.credit = MediaCredit.from_xml_node(node)
        elif is_element(node, MEDIA_NS, "player"):
            self.player_url = get_property(node, "url")
        elif is_element(node, MEDIA_NS, "rating"):
            self._parse_rating(node)
        elif is_element(node, MEDIA_NS, "restriction"):
            self._parse_restriction(node)
        elif is_element(node, MEDIA_NS, "thumbnail"):
            self.thumbnails.append(MediaThumbnail.from_xml_node(node))
        else:
            return False
        return True

    def _parse_rating(self, node: etree._Element) -> None:
        self.rating = get_node_content(node)
        self.rating_scheme = get_property(node, "scheme")
        countries = node.get("country")
        if countries is None:
            return
        for country in countries.split(","):
            if country:
                self.restricted_countries[country] = True

    def _parse_restriction(self, node: etree._Element) -> None:
        restriction_type = node.get("type")
        if restriction_type != "country":
            raise unknown_property_value(node, "type", restriction_type or "")
        relationship = node.get("relationship")
        if relationship not in _RELATIONSHIPS:
            raise unknown_property_value(node, "relationship", relationship or "")
        restricted = _RELATIONSHIPS[relationship]

        # the listed countries are exceptions to the rule for everywhere else
        self.restricted_countries["all"] = not restricted
        for country in (get_node_content(node) or "").split():
            self.restricted_countries[country] = restricted

    def is_restricted_in_country(self, country: str) -> bool:
        """Return True if viewing the media is restricted in *country*."""
        if country in self.restricted_countries:
            return self.restricted_countries[country]
        return self.restricted_countries.get("all", False)

    def get_xml(self, builder: XMLBuilder) -> None:
        builder.add_child(self.category)
        if self.title is not None:
            builder.add_element("media:title", self.title, {"type": "plain"})
        if self.description is not None:
            builder.add_element("media:description", self.description, {"type": "plain"})
        if self.keywords is not None:
            builder.add_element("media:keywords", self.keywords)
        for content in self.contents:
            builder.add_child(content)
        builder.add_child(self.credit)
        if self.player_url is not None:
            builder.add_element("media:player", attributes={"url": self.player_url})
        self._get_restrictions(builder)
        for thumbnail in self.thumbnails:
            builder.add_child(thumbnail)

    def _get_restrictions(self, builder: XMLBuilder) -> None:
        default = self.restricted_countries.get("all")
        rated = None
        if default is None:
            rated = ",".join(
                country for country, restricted in self.restricted_countries.items() if restricted
            ) or None
        if self.rating is not None or self.rating_scheme is not None or rated is not None:
            builder.add_element(
                "media:rating",
                self.rating,
                {"scheme": self.rating_scheme, "country": rated},
            )

        if default is not None:
            exceptions = [
                country
                for country, restricted in self.restricted_countries.items()
                if country != "all" and restricted != default
            ]
            builder.add_element(
                "media:restriction",
                " ".join(exceptions),
                {"type": "country", "relationship": "allow" if default else "deny"},
            )

    def get_namespaces(self) -> dict[str, str]:
        namespaces: dict[str, str] = {}
        children = [self.category, self.credit, *self.contents, *self.thumbnails]
        for child in children:
            if child is not None:
                merge_namespaces(namespaces, collect_namespaces(child))
        return namespaces
