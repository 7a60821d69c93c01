"""Shared test fixtures for gdatakit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gdatakit.config import ParserConfig
from gdatakit.namespaces import ATOM_NS, GD_NS, MEDIA_NS, OPENSEARCH_NS


@pytest.fixture
def default_config() -> ParserConfig:
    """Return a default ParserConfig."""
    return ParserConfig()


@pytest.fixture
def tmp_config_file(tmp_path: Path):
    """Factory fixture to write config text to a temp file and return the path."""

    def _write(content: str, filename: str) -> str:
        file_path = tmp_path / filename
        file_path.write_text(content, encoding="utf-8")
        return str(file_path)

    return _write


@pytest.fixture
def sample_author_xml() -> str:
    """Minimal author without namespace declarations."""
    return "<author><name>Jane Doe</name><uri>http://example.com</uri></author>"


@pytest.fixture
def sample_entry_xml() -> str:
    """Entry written in the exact form the serializer produces."""
    return (
        f"<entry xmlns='{ATOM_NS}' xmlns:gd='{GD_NS}' gd:etag='W/abc'>"
        "<title>Hello</title>"
        "<id>urn:entry:1</id>"
        "<updated>2009-04-17T15:00:00.000Z</updated>"
        "<published>2009-04-16T10:00:00+01:00</published>"
        "<summary>A summary</summary>"
        "<content type='text'>Body text</content>"
        "<category term='news'/>"
        "<link href='http://example.com/1' rel='self'/>"
        "<author><name>Jane Doe</name></author>"
        "</entry>"
    )


@pytest.fixture
def sample_feed_xml() -> str:
    """Feed with paging data, two entries and an unrecognized media group."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="{ATOM_NS}" xmlns:openSearch="{OPENSEARCH_NS}"
      xmlns:gd="{GD_NS}" xmlns:media="{MEDIA_NS}" gd:etag="W/feed">
    <title>Example feed</title>
    <id>urn:feed</id>
    <updated>2009-04-17T15:00:00Z</updated>
    <generator uri="http://example.com/gen" version="1.0">Generator</generator>
    <openSearch:totalResults>2</openSearch:totalResults>
    <openSearch:startIndex>1</openSearch:startIndex>
    <openSearch:itemsPerPage>25</openSearch:itemsPerPage>
    <link href="http://example.com/feed" rel="self" type="application/atom+xml"/>
    <entry gd:etag="W/one">
        <title>First</title>
        <id>urn:entry:1</id>
        <media:group>
            <media:title>Clip</media:title>
        </media:group>
    </entry>
    <!-- second entry -->
    <entry>
        <title>Second</title>
        <id>urn:entry:2</id>
    </entry>
</feed>"""
