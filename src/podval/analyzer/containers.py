"""Root and container analyzers: ``rss``, ``channel``, ``item`` and ``podcast:liveItem``.

Every occurrence of a child tag is analyzed before its cardinality is
checked, so a duplicated tag is reported once on the parent and still
validated in full.
"""

from __future__ import annotations

from datetime import datetime

from podval.analyzer.builder import Cardinality, NodeBuilder
from podval.analyzer.composite import (
    ALTERNATE_ENCLOSURE,
    IMAGES,
    LOCATION,
    VALUE,
    analyze_alternate_enclosure,
    analyze_images,
    analyze_location,
    analyze_value,
)
from podval.analyzer.tags import (
    BLOCK,
    CHAPTERS,
    CONTENT_LINK,
    EPISODE,
    FUNDING,
    GUID,
    LICENSE,
    LOCKED,
    MEDIUM,
    PERSON,
    SEASON,
    SOCIAL_INTERACT,
    SOUNDBITE,
    TITLE,
    TRAILER,
    TRANSCRIPT,
    TXT,
    analyze_block,
    analyze_chapters,
    analyze_content_link,
    analyze_episode,
    analyze_funding,
    analyze_guid,
    analyze_license,
    analyze_locked,
    analyze_medium,
    analyze_person,
    analyze_season,
    analyze_social_interact,
    analyze_soundbite,
    analyze_title,
    analyze_trailer,
    analyze_transcript,
    analyze_txt,
)
from podval.diagnostics.errors import Custom
from podval.diagnostics.nodes import Node, TagName
from podval.models.feed import Channel, Document, Item, LiveItem
from podval.models.parsed import Ok

RSS = TagName.rss("rss")
CHANNEL = TagName.rss("channel")
ITEM = TagName.rss("item")
LIVE_ITEM = TagName.podcast("liveItem")


def analyze_document(document: Document) -> Node:
    """Validate a whole decoded feed; exactly one ``channel`` is expected."""
    return (
        NodeBuilder(RSS)
        .children(CHANNEL, document.channel, analyze_channel, Cardinality.EXACTLY_ONE)
        .build()
    )


def analyze_channel(channel: Channel) -> Node:
    return (
        NodeBuilder(CHANNEL)
        .children(TITLE, channel.title, analyze_title, Cardinality.EXACTLY_ONE)
        .children(GUID, channel.podcast_guid, analyze_guid, Cardinality.AT_MOST_ONE)
        .children(MEDIUM, channel.podcast_medium, analyze_medium, Cardinality.AT_MOST_ONE)
        .children(TXT, channel.podcast_txt, analyze_txt)
        .children(BLOCK, channel.podcast_block, analyze_block)
        .children(LOCKED, channel.podcast_locked, analyze_locked, Cardinality.AT_MOST_ONE)
        .children(FUNDING, channel.podcast_funding, analyze_funding)
        .children(LOCATION, channel.podcast_location, analyze_location, Cardinality.AT_MOST_ONE)
        .children(PERSON, channel.podcast_person, analyze_person)
        .children(TRAILER, channel.podcast_trailer, analyze_trailer)
        .children(LICENSE, channel.podcast_license, analyze_license, Cardinality.AT_MOST_ONE)
        .children(VALUE, channel.podcast_value, analyze_value, Cardinality.AT_MOST_ONE)
        .children(IMAGES, channel.podcast_images, analyze_images, Cardinality.AT_MOST_ONE)
        .children(ITEM, channel.item, analyze_item)
        .children(LIVE_ITEM, channel.podcast_live_item, analyze_live_item)
        .build()
    )


def _item_children(builder: NodeBuilder, item: Item) -> NodeBuilder:
    """Children shared by ``item`` and ``podcast:liveItem``."""
    return (
        builder.children(TITLE, item.title, analyze_title, Cardinality.EXACTLY_ONE)
        .children(TRANSCRIPT, item.podcast_transcript, analyze_transcript)
        .children(CHAPTERS, item.podcast_chapters, analyze_chapters, Cardinality.AT_MOST_ONE)
        .children(SOUNDBITE, item.podcast_soundbite, analyze_soundbite)
        .children(PERSON, item.podcast_person, analyze_person)
        .children(LOCATION, item.podcast_location, analyze_location, Cardinality.AT_MOST_ONE)
        .children(SEASON, item.podcast_season, analyze_season, Cardinality.AT_MOST_ONE)
        .children(EPISODE, item.podcast_episode, analyze_episode, Cardinality.AT_MOST_ONE)
        .children(LICENSE, item.podcast_license, analyze_license, Cardinality.AT_MOST_ONE)
        .children(
            ALTERNATE_ENCLOSURE,
            item.podcast_alternate_enclosure,
            analyze_alternate_enclosure,
        )
        .children(VALUE, item.podcast_value, analyze_value, Cardinality.AT_MOST_ONE)
        .children(IMAGES, item.podcast_images, analyze_images, Cardinality.AT_MOST_ONE)
        .children(SOCIAL_INTERACT, item.podcast_social_interact, analyze_social_interact)
        .children(TXT, item.podcast_txt, analyze_txt)
    )


def analyze_item(item: Item) -> Node:
    return _item_children(NodeBuilder(ITEM), item).build()


def _ends_before_start(start: datetime, end: datetime) -> bool:
    # Naive and aware datetimes cannot be ordered.
    if (start.tzinfo is None) != (end.tzinfo is None):
        return False
    return end < start


def analyze_live_item(live_item: LiveItem) -> Node:
    builder = (
        NodeBuilder(LIVE_ITEM)
        .parsed("status", live_item.status, required=True)
        .parsed("start", live_item.start, required=True)
        .parsed("end", live_item.end)
    )
    match (live_item.start, live_item.end):
        case (Ok(value=datetime() as start), Ok(value=datetime() as end)):
            if _ends_before_start(start, end):
                builder.error(Custom("Attribute «end» is earlier than attribute «start»"))
    _item_children(builder, live_item)
    return builder.children(
        CONTENT_LINK, live_item.podcast_content_link, analyze_content_link
    ).build()
