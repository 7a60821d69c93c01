"""Unit tests for gdatakit.media -- Media RSS element types."""

from __future__ import annotations

import pytest

from gdatakit.errors import ErrorCode, ParserError
from gdatakit.media import (
    MediaCategory,
    MediaContent,
    MediaCredit,
    MediaExpression,
    MediaGroup,
    MediaMedium,
    MediaThumbnail,
)
from gdatakit.media.thumbnail import format_time, parse_time
from gdatakit.namespaces import ATOM_NS, MEDIA_NS

MEDIA = f"xmlns:media='{MEDIA_NS}'"


@pytest.fixture
def sample_group_xml() -> str:
    return f"""<media:group {MEDIA}>
    <media:title type='plain'>Clip</media:title>
    <media:description type='plain'>About the clip</media:description>
    <media:keywords>music, live</media:keywords>
    <media:category scheme='urn:cat' label='Music'>Music</media:category>
    <media:content url='http://e/v.flv' type='video/x-flv' medium='video'
        isDefault='true' expression='full' duration='215'/>
    <media:content url='rtsp://e/v.3gp' type='video/3gpp' medium='video'
        expression='sample' duration='215'/>
    <media:credit role='Uploader' scheme='urn:youtube'>jane</media:credit>
    <media:player url='http://e/watch'/>
    <media:restriction type='country' relationship='deny'>DE FR</media:restriction>
    <media:thumbnail url='http://e/1.jpg' height='90' width='120' time='00:00:03.750'/>
    <media:thumbnail url='http://e/2.jpg' height='90' width='120'/>
</media:group>"""


class TestMediaCategory:
    """Parsing <media:category>."""

    def test_default_scheme(self):
        category = MediaCategory.from_xml(f"<media:category {MEDIA}>Music</media:category>")
        assert category.category == "Music"
        assert category.scheme == "http://video.search.yahoo.com/mrss/category_schema"

    def test_empty_content(self):
        with pytest.raises(ParserError) as exc_info:
            MediaCategory.from_xml(f"<media:category {MEDIA}/>")
        assert exc_info.value.code == ErrorCode.E_REQUIRED_CONTENT_MISSING

    def test_empty_scheme(self):
        with pytest.raises(ParserError) as exc_info:
            MediaCategory.from_xml(f"<media:category {MEDIA} scheme=''>Music</media:category>")
        assert exc_info.value.property_name == "scheme"


class TestMediaContent:
    """Parsing and serializing <media:content>."""

    def test_parse(self):
        content = MediaContent.from_xml(
            f"<media:content {MEDIA} url='http://e/v.flv' type='video/x-flv' medium='video' "
            "isDefault='true' expression='nonstop' duration='215' fileSize='1024' "
            "height='240' width='320'/>"
        )
        assert content.url == "http://e/v.flv"
        assert content.type == "video/x-flv"
        assert content.medium is MediaMedium.VIDEO
        assert content.is_default is True
        assert content.expression is MediaExpression.NONSTOP
        assert (content.duration, content.file_size) == (215, 1024)
        assert (content.height, content.width) == (240, 320)

    def test_defaults(self):
        content = MediaContent.from_xml(f"<media:content {MEDIA} url='http://e/v'/>")
        assert content.expression is MediaExpression.FULL
        assert content.medium is None
        assert content.is_default is False

    @pytest.mark.parametrize(
        ("attribute", "value"),
        [("medium", "hologram"), ("expression", "partial"), ("isDefault", "maybe")],
    )
    def test_unknown_values(self, attribute, value):
        with pytest.raises(ParserError) as exc_info:
            MediaContent.from_xml(f"<media:content {MEDIA} url='http://e/v' {attribute}='{value}'/>")
        assert exc_info.value.code == ErrorCode.E_UNKNOWN_PROPERTY_VALUE
        assert exc_info.value.property_name == attribute

    def test_empty_url(self):
        with pytest.raises(ParserError) as exc_info:
            MediaContent.from_xml(f"<media:content {MEDIA} url=''/>")
        assert exc_info.value.code == ErrorCode.E_REQUIRED_PROPERTY_MISSING

    def test_serialize(self):
        content = MediaContent(url="http://e/v", medium=MediaMedium.AUDIO, is_default=True, duration=5)
        assert content.to_xml(declare_namespaces=False) == (
            "<media:content url='http://e/v' isDefault='true' medium='audio' duration='5'/>"
        )


class TestMediaCredit:
    """Parsing <media:credit>."""

    def test_parse(self):
        credit = MediaCredit.from_xml(f"<media:credit {MEDIA} role='Uploader'>jane</media:credit>")
        assert credit.credit == "jane"
        assert credit.scheme == "urn:ebu"
        assert credit.role == "uploader"

    def test_empty(self):
        with pytest.raises(ParserError) as exc_info:
            MediaCredit.from_xml(f"<media:credit {MEDIA}/>")
        assert exc_info.value.code == ErrorCode.E_REQUIRED_CONTENT_MISSING


class TestMediaThumbnail:
    """Parsing <media:thumbnail> and its time offsets."""

    def test_parse(self):
        thumb = MediaThumbnail.from_xml(
            f"<media:thumbnail {MEDIA} url='http://e/1.jpg' width='120' height='90' time='00:01:03.5'/>"
        )
        assert thumb.url == "http://e/1.jpg"
        assert (thumb.width, thumb.height) == (120, 90)
        assert thumb.time == 63500

    def test_missing_url(self):
        with pytest.raises(ParserError) as exc_info:
            MediaThumbnail.from_xml(f"<media:thumbnail {MEDIA} width='1'/>")
        assert exc_info.value.property_name == "url"

    def test_bad_time(self):
        with pytest.raises(ParserError) as exc_info:
            MediaThumbnail.from_xml(f"<media:thumbnail {MEDIA} url='http://e/1.jpg' time='3s'/>")
        assert exc_info.value.code == ErrorCode.E_UNKNOWN_PROPERTY_VALUE
        assert exc_info.value.actual_value == "3s"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("00:00:03", 3000), ("01:00:00", 3600000), ("00:00:00.001", 1), ("1:00:00", None), ("", None)],
    )
    def test_parse_time(self, text, expected):
        assert parse_time(text) == expected

    def test_format_time(self):
        assert format_time(3000) == "00:00:03"
        assert format_time(3723750) == "01:02:03.750"


class TestMediaGroup:
    """Parsing and serializing <media:group>."""

    def test_parse(self, sample_group_xml):
        group = MediaGroup.from_xml(sample_group_xml)
        assert group.title == "Clip"
        assert group.description == "About the clip"
        assert group.keywords == "music, live"
        assert group.category.label == "Music"
        assert [c.expression for c in group.contents] == [
            MediaExpression.FULL,
            MediaExpression.SAMPLE,
        ]
        assert group.credit.role == "uploader"
        assert group.player_url == "http://e/watch"
        assert [t.url for t in group.thumbnails] == ["http://e/1.jpg", "http://e/2.jpg"]
        assert group.extra_xml == []

    def test_deny_restriction(self, sample_group_xml):
        group = MediaGroup.from_xml(sample_group_xml)
        assert group.is_restricted_in_country("DE") is True
        assert group.is_restricted_in_country("FR") is True
        assert group.is_restricted_in_country("US") is False

    def test_allow_restriction(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA}><media:restriction type='country' relationship='allow'>US"
            "</media:restriction></media:group>"
        )
        assert group.is_restricted_in_country("US") is False
        assert group.is_restricted_in_country("DE") is True

    def test_rating(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA}><media:rating country='DE,AT'/></media:group>"
        )
        assert group.is_restricted_in_country("AT") is True
        assert group.is_restricted_in_country("GB") is False

    def test_bad_restriction_type(self):
        with pytest.raises(ParserError) as exc_info:
            MediaGroup.from_xml(
                f"<media:group {MEDIA}><media:restriction type='uri' relationship='deny'>x"
                "</media:restriction></media:group>"
            )
        assert exc_info.value.property_name == "type"

    def test_bad_relationship(self):
        with pytest.raises(ParserError) as exc_info:
            MediaGroup.from_xml(
                f"<media:group {MEDIA}><media:restriction type='country' relationship='maybe'>x"
                "</media:restriction></media:group>"
            )
        assert exc_info.value.property_name == "relationship"

    def test_duplicate_credit(self):
        with pytest.raises(ParserError) as exc_info:
            MediaGroup.from_xml(
                f"<media:group {MEDIA}><media:credit>a</media:credit>"
                "<media:credit>b</media:credit></media:group>"
            )
        assert exc_info.value.code == ErrorCode.E_DUPLICATE_ELEMENT
        assert exc_info.value.element_path == "<media:group/media:credit>"

    def test_round_trip(self):
        xml = (
            f"<media:group xmlns='{ATOM_NS}' xmlns:media='{MEDIA_NS}'>"
            "<media:category scheme='urn:cat'>Music</media:category>"
            "<media:title type='plain'>Clip</media:title>"
            "<media:keywords>a, b</media:keywords>"
            "<media:content url='http://e/v.flv' type='video/x-flv' expression='full' medium='video'/>"
            "<media:credit scheme='urn:ebu' role='uploader'>jane</media:credit>"
            "<media:player url='http://e/watch'/>"
            "<media:thumbnail url='http://e/1.jpg' height='90' width='120' time='00:00:03.750'/>"
            "</media:group>"
        )
        assert MediaGroup.from_xml(xml).to_xml() == xml

    def test_restrictions_survive_round_trip(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA}>"
            "<media:rating scheme='urn:simple' country='DE,AT'>nonadult</media:rating>"
            "<media:restriction type='country' relationship='deny'>DE FR</media:restriction>"
            "</media:group>"
        )
        xml = group.to_xml()
        assert xml == (
            f"<media:group xmlns='{ATOM_NS}' xmlns:media='{MEDIA_NS}'>"
            "<media:rating scheme='urn:simple'>nonadult</media:rating>"
            "<media:restriction type='country' relationship='deny'>DE AT FR</media:restriction>"
            "</media:group>"
        )
        again = MediaGroup.from_xml(xml)
        assert again == group
        assert again.is_restricted_in_country("DE") is True
        assert again.is_restricted_in_country("AT") is True
        assert again.is_restricted_in_country("US") is False

    def test_allow_restriction_round_trip(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA}><media:restriction type='country' relationship='allow'>US"
            "</media:restriction></media:group>"
        )
        again = MediaGroup.from_xml(group.to_xml())
        assert again.is_restricted_in_country("US") is False
        assert again.is_restricted_in_country("DE") is True

    def test_rating_countries_round_trip(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA}><media:rating country='DE,AT'/></media:group>"
        )
        assert group.to_xml(declare_namespaces=False) == (
            "<media:group><media:rating country='DE,AT'/></media:group>"
        )

    def test_restrictions_built_in_code(self):
        group = MediaGroup(restricted_countries={"all": False, "GB": True})
        assert group.to_xml(declare_namespaces=False) == (
            "<media:group><media:restriction type='country' relationship='deny'>GB"
            "</media:restriction></media:group>"
        )

    def test_unknown_child_preserved(self):
        group = MediaGroup.from_xml(
            f"<media:group {MEDIA} xmlns:yt='urn:yt'><yt:duration seconds='215'/></media:group>"
        )
        assert group.extra_xml == ["<yt:duration seconds='215'/>"]
        assert group.get_all_namespaces()["yt"] == "urn:yt"
