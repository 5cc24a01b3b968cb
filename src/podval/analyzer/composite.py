"""Analyzers for tags built from structured values or nested tags.

Composite attribute values (geo, osm, srcset) are atomic: the decoder either
returns the whole record or rejects the whole attribute.
"""

from __future__ import annotations

from podval.analyzer.builder import Cardinality, NodeBuilder, format_number, format_scalar
from podval.analyzer.limits import MAX_LABEL_LENGTH, MAX_TEXT_LENGTH
from podval.diagnostics.errors import MissingAttribute
from podval.diagnostics.nodes import NODE_VALUE, Node, Object, TagName, Value
from podval.models.feed import (
    AlternateEnclosure,
    Geo,
    Images,
    ImageSource,
    Integrity,
    Location,
    Osm,
    Source,
    ValueRecipient,
)
from podval.models.feed import (
    Value as ValueTag,
)

LOCATION = TagName.podcast("location")
IMAGES = TagName.podcast("images")
VALUE = TagName.podcast("value")
VALUE_RECIPIENT = TagName.podcast("valueRecipient")
ALTERNATE_ENCLOSURE = TagName.podcast("alternateEnclosure")
SOURCE = TagName.podcast("source")
INTEGRITY = TagName.podcast("integrity")


# ---------------------------------------------------------------------------
# Canonical renderings
# ---------------------------------------------------------------------------


def format_geo(geo: Geo) -> str:
    """``{ latitude: 30.2672, longitude: 97.7431 }`` plus altitude/uncertainty when set."""
    parts = [
        f"latitude: {format_number(geo.latitude)}",
        f"longitude: {format_number(geo.longitude)}",
    ]
    if geo.altitude is not None:
        parts.append(f"altitude: {format_number(geo.altitude)}")
    if geo.uncertainty is not None:
        parts.append(f"uncertainty: {format_number(geo.uncertainty)}")
    return "{ " + ", ".join(parts) + " }"


def format_osm(osm: Osm) -> str:
    parts = [f"type: {format_scalar(osm.type)}", f"id: {osm.id}"]
    if osm.revision is not None:
        parts.append(f"revision: {osm.revision}")
    return "{ " + ", ".join(parts) + " }"


def format_srcset(sources: list[ImageSource]) -> str:
    entries = [f"{{ url: {source.url}, width: {source.width} }}" for source in sources]
    return "[" + ", ".join(entries) + "]"


def _render_geo(geo: Geo) -> Value:
    return Object(format_geo(geo))


def _render_osm(osm: Osm) -> Value:
    return Object(format_osm(osm))


def _render_srcset(sources: list[ImageSource]) -> Value:
    return Object(format_srcset(sources))


# ---------------------------------------------------------------------------
# Analyzers
# ---------------------------------------------------------------------------


def analyze_location(location: Location) -> Node:
    return (
        NodeBuilder(LOCATION)
        .text(NODE_VALUE, location.value, required=True, max_length=MAX_TEXT_LENGTH)
        .parsed("geo", location.geo, render=_render_geo)
        .parsed("osm", location.osm, render=_render_osm)
        .build()
    )


def analyze_images(images: Images) -> Node:
    return (
        NodeBuilder(IMAGES)
        .parsed("srcset", images.srcset, required=True, render=_render_srcset)
        .build()
    )


def analyze_value_recipient(recipient: ValueRecipient) -> Node:
    """Checks the recipient's attributes; ``customKey`` and ``customValue`` go in pairs."""
    builder = (
        NodeBuilder(VALUE_RECIPIENT)
        .text("name", recipient.name, max_length=MAX_TEXT_LENGTH)
        .text("customKey", recipient.custom_key)
        .text("customValue", recipient.custom_value)
    )
    # Name the half that is missing, not the one that is present.
    match (recipient.custom_key, recipient.custom_value):
        case (str(), None):
            builder.error(MissingAttribute("customValue"))
        case (None, str()):
            builder.error(MissingAttribute("customKey"))
    return (
        builder.parsed("type", recipient.type, required=True)
        .text("address", recipient.address, required=True)
        .parsed("split", recipient.split, required=True)
        .parsed("fee", recipient.fee)
        .build()
    )


def analyze_value(value: ValueTag) -> Node:
    return (
        NodeBuilder(VALUE)
        .parsed("type", value.type, required=True)
        .parsed("method", value.method, required=True)
        .parsed("suggested", value.suggested)
        .children(
            VALUE_RECIPIENT,
            value.value_recipient,
            analyze_value_recipient,
            Cardinality.AT_LEAST_ONE,
        )
        .build()
    )


def analyze_source(source: Source) -> Node:
    return (
        NodeBuilder(SOURCE)
        .url("uri", source.uri, required=True)
        .text("contentType", source.content_type)
        .build()
    )


def analyze_integrity(integrity: Integrity) -> Node:
    return (
        NodeBuilder(INTEGRITY)
        .parsed("type", integrity.type, required=True)
        .text(NODE_VALUE, integrity.value, required=True)
        .build()
    )


def analyze_alternate_enclosure(enclosure: AlternateEnclosure) -> Node:
    return (
        NodeBuilder(ALTERNATE_ENCLOSURE)
        .parsed("type", enclosure.type, required=True)
        .parsed("length", enclosure.length)
        .parsed("bitrate", enclosure.bitrate)
        .parsed("height", enclosure.height)
        .parsed("lang", enclosure.lang)
        .text("title", enclosure.title, max_length=MAX_LABEL_LENGTH)
        .text("rel", enclosure.rel, max_length=MAX_LABEL_LENGTH)
        .text("codecs", enclosure.codecs)
        .parsed("default", enclosure.default)
        .children(SOURCE, enclosure.source, analyze_source, Cardinality.AT_LEAST_ONE)
        .children(INTEGRITY, enclosure.integrity, analyze_integrity, Cardinality.AT_MOST_ONE)
        .build()
    )
