"""Tests for composite and nested tag analyzers."""

from __future__ import annotations

from podval.analyzer.composite import (
    ALTERNATE_ENCLOSURE,
    INTEGRITY,
    SOURCE,
    VALUE_RECIPIENT,
    analyze_alternate_enclosure,
    analyze_images,
    analyze_location,
    analyze_value,
    analyze_value_recipient,
    format_geo,
    format_osm,
    format_srcset,
)
from podval.diagnostics import (
    NODE_VALUE,
    AttributeExceedsMaxLength,
    InvalidAttribute,
    InvalidAttributeWithReason,
    MissingAttribute,
    MissingChild,
    MultipleChildren,
    Object,
    Text,
)
from podval.models import (
    AlternateEnclosure,
    Geo,
    Images,
    ImageSource,
    Integrity,
    Location,
    Ok,
    Osm,
    Other,
    Source,
    Value,
    ValueRecipient,
)
from podval.models.enums import (
    EnclosureMime,
    IntegrityType,
    OsmType,
    ValueMethod,
    ValueRecipientType,
    ValueType,
)

ADDRESS = "03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a"


def _recipient(**overrides: object) -> ValueRecipient:
    fields: dict[str, object] = {
        "type": Ok(ValueRecipientType.NODE),
        "address": ADDRESS,
        "split": Ok(99),
    }
    fields.update(overrides)
    return ValueRecipient(**fields)


class TestRenderings:
    def test_geo_minimal(self) -> None:
        geo = Geo(latitude=30.2672, longitude=97.7431)
        assert format_geo(geo) == "{ latitude: 30.2672, longitude: 97.7431 }"

    def test_geo_full(self) -> None:
        geo = Geo(latitude=30.2672, longitude=97.7431, altitude=10, uncertainty=350)
        assert format_geo(geo) == (
            "{ latitude: 30.2672, longitude: 97.7431, altitude: 10, uncertainty: 350 }"
        )

    def test_osm(self) -> None:
        assert format_osm(Osm(type=OsmType.RELATION, id=148838, revision=2)) == (
            "{ type: relation, id: 148838, revision: 2 }"
        )
        assert format_osm(Osm(type=OsmType.WAY, id=7)) == "{ type: way, id: 7 }"

    def test_srcset(self) -> None:
        sources = [
            ImageSource(url="https://example.com/images/a.jpg", width=1500),
            ImageSource(url="https://example.com/images/b.jpg", width=150),
        ]
        assert format_srcset(sources) == (
            "[{ url: https://example.com/images/a.jpg, width: 1500 }, "
            "{ url: https://example.com/images/b.jpg, width: 150 }]"
        )


class TestLocation:
    def test_geo_rendered_as_object(self) -> None:
        node = analyze_location(
            Location(value="Austin, TX", geo=Ok(Geo(latitude=30.2672, longitude=97.7431)))
        )
        assert node.errors == []
        assert node.attribute("geo") == Object("{ latitude: 30.2672, longitude: 97.7431 }")

    def test_rejected_osm(self) -> None:
        node = analyze_location(
            Location(value="Austin, TX", osm=Other("X123", "unknown OSM type"))
        )
        assert node.errors == [InvalidAttributeWithReason("osm", "X123", "unknown OSM type")]

    def test_rejected_geo_is_atomic(self) -> None:
        node = analyze_location(
            Location(value="Austin, TX", geo=Other("geo:30.2672", "missing longitude"))
        )
        assert node.errors == [
            InvalidAttributeWithReason("geo", "geo:30.2672", "missing longitude")
        ]
        assert node.attribute("geo") is None
        assert node.attribute(NODE_VALUE) == Text("Austin, TX")

    def test_name_required(self) -> None:
        assert analyze_location(Location()).errors == [MissingAttribute(NODE_VALUE)]


class TestImages:
    def test_srcset_required(self) -> None:
        assert analyze_images(Images()).errors == [MissingAttribute("srcset")]

    def test_srcset_object(self) -> None:
        sources = [ImageSource(url="https://example.com/images/a.jpg", width=1500)]
        node = analyze_images(Images(srcset=Ok(sources)))
        assert node.attribute("srcset") == Object(
            "[{ url: https://example.com/images/a.jpg, width: 1500 }]"
        )

    def test_rejected_srcset_is_atomic(self) -> None:
        raw = "https://example.com/images/a.jpg 1500w, not-a-candidate"
        node = analyze_images(Images(srcset=Other(raw)))
        assert node.errors == [InvalidAttribute("srcset", raw)]
        assert node.attributes == []


class TestValueRecipient:
    def test_valid(self) -> None:
        node = analyze_value_recipient(_recipient(name="Host", fee=Ok(False)))
        assert node.errors == []
        assert node.attributes == [
            ("name", Text("Host")),
            ("type", Object("node")),
            ("address", Text(ADDRESS)),
            ("split", Object("99")),
            ("fee", Object("false")),
        ]

    def test_custom_pair_complete(self) -> None:
        node = analyze_value_recipient(_recipient(custom_key="696969", custom_value="abc"))
        assert node.errors == []

    def test_custom_key_without_value(self) -> None:
        node = analyze_value_recipient(_recipient(custom_key="696969"))
        assert node.errors == [MissingAttribute("customValue")]

    def test_custom_value_without_key(self) -> None:
        node = analyze_value_recipient(_recipient(custom_value="abc"))
        assert node.errors == [MissingAttribute("customKey")]

    def test_required_attributes(self) -> None:
        node = analyze_value_recipient(ValueRecipient())
        assert node.errors == [
            MissingAttribute("type"),
            MissingAttribute("address"),
            MissingAttribute("split"),
        ]

    def test_name_over_limit(self) -> None:
        name = "n" * 129
        node = analyze_value_recipient(_recipient(name=name))
        assert node.errors == [AttributeExceedsMaxLength("name", name, 128)]


class TestValue:
    def test_needs_a_recipient(self) -> None:
        node = analyze_value(Value(type=Ok(ValueType.LIGHTNING), method=Ok(ValueMethod.KEYSEND)))
        assert node.errors == [MissingChild(VALUE_RECIPIENT)]

    def test_recipients_become_children(self) -> None:
        node = analyze_value(
            Value(
                type=Ok(ValueType.LIGHTNING),
                method=Ok(ValueMethod.KEYSEND),
                suggested=Ok(0.00000005),
                value_recipient=[_recipient(), _recipient(custom_key="k")],
            )
        )
        assert node.errors == []
        assert [child.name for child in node.children] == [VALUE_RECIPIENT, VALUE_RECIPIENT]
        assert node.children[1].errors == [MissingAttribute("customValue")]


class TestAlternateEnclosure:
    def test_valid(self) -> None:
        node = analyze_alternate_enclosure(
            AlternateEnclosure(
                type=Ok(EnclosureMime.AUDIO_OPUS),
                bitrate=Ok(96000.0),
                title="Standard",
                default=Ok(True),
                source=[Source(uri=Ok("https://example.com/file-0.opus"))],
                integrity=[Integrity(type=Ok(IntegrityType.SRI), value="sha384-abc")],
            )
        )
        assert node.errors == []
        assert node.attribute("bitrate") == Object("96000")
        assert [child.name for child in node.children] == [SOURCE, INTEGRITY]

    def test_child_rules(self) -> None:
        node = analyze_alternate_enclosure(
            AlternateEnclosure(
                type=Ok(EnclosureMime.AUDIO_MPEG),
                integrity=[
                    Integrity(type=Ok(IntegrityType.SRI), value="a"),
                    Integrity(type=Ok(IntegrityType.PGP_SIGNATURE), value="b"),
                ],
            )
        )
        assert node.name == ALTERNATE_ENCLOSURE
        assert node.errors == [MissingChild(SOURCE), MultipleChildren(INTEGRITY)]
        assert len(node.children) == 2

    def test_label_limits(self) -> None:
        title = "t" * 33
        node = analyze_alternate_enclosure(
            AlternateEnclosure(
                type=Ok(EnclosureMime.AUDIO_MPEG),
                title=title,
                rel="r" * 32,
                source=[Source(uri=Ok("https://example.com/file.mp3"))],
            )
        )
        assert node.errors == [AttributeExceedsMaxLength("title", title, 32)]
        assert node.attribute("rel") == Text("r" * 32)

    def test_source_uri_required(self) -> None:
        node = analyze_alternate_enclosure(
            AlternateEnclosure(type=Ok(EnclosureMime.AUDIO_MPEG), source=[Source()])
        )
        assert node.errors == []
        assert node.children[0].errors == [MissingAttribute("uri")]
