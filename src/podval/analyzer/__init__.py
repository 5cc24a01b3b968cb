"""Tag analyzers: decoded document in, diagnostic tree out."""

from podval.analyzer.builder import Cardinality, NodeBuilder
from podval.analyzer.composite import (
    analyze_alternate_enclosure,
    analyze_images,
    analyze_integrity,
    analyze_location,
    analyze_source,
    analyze_value,
    analyze_value_recipient,
)
from podval.analyzer.containers import (
    analyze_channel,
    analyze_document,
    analyze_item,
    analyze_live_item,
)
from podval.analyzer.tags import (
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

__all__ = [
    "Cardinality",
    "NodeBuilder",
    "analyze_alternate_enclosure",
    "analyze_block",
    "analyze_channel",
    "analyze_chapters",
    "analyze_content_link",
    "analyze_document",
    "analyze_episode",
    "analyze_funding",
    "analyze_guid",
    "analyze_images",
    "analyze_integrity",
    "analyze_item",
    "analyze_license",
    "analyze_live_item",
    "analyze_location",
    "analyze_locked",
    "analyze_medium",
    "analyze_person",
    "analyze_season",
    "analyze_social_interact",
    "analyze_soundbite",
    "analyze_source",
    "analyze_title",
    "analyze_trailer",
    "analyze_transcript",
    "analyze_txt",
    "analyze_value",
    "analyze_value_recipient",
]
