"""Typed document model produced by the permissive feed decoder.

Every repeatable tag is a list (possibly empty), every decoded attribute is
a ``Parsed`` outcome and free text stays a plain string. Instances are
frozen: validation reads them and never writes back.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AnyUrl, BaseModel

from podval.models.enums import (
    ChaptersMime,
    EnclosureMime,
    IntegrityType,
    LiveItemStatus,
    Medium,
    OsmType,
    PersonGroup,
    PersonRole,
    Service,
    SocialProtocol,
    TranscriptMime,
    TranscriptRel,
    ValueMethod,
    ValueRecipientType,
    ValueType,
)
from podval.models.parsed import Parsed


class FeedModel(BaseModel):
    """Common configuration for all decoded tags.

    Instances are revalidated so that the payload of an ``Ok`` built in Python
    is checked and coerced like one read from a snapshot.
    """

    model_config = {"frozen": True, "extra": "forbid", "revalidate_instances": "always"}


# ---------------------------------------------------------------------------
# Composite attribute values
# ---------------------------------------------------------------------------


class Geo(FeedModel):
    """A ``geo:`` URI: coordinates plus optional altitude and uncertainty."""

    latitude: float
    longitude: float
    altitude: float | None = None
    uncertainty: float | None = None


class Osm(FeedModel):
    """An OpenStreetMap reference such as ``R148838#2``."""

    type: OsmType
    id: int
    revision: int | None = None


class ImageSource(FeedModel):
    """One ``url width`` candidate of an image srcset."""

    url: AnyUrl
    width: int


# ---------------------------------------------------------------------------
# Namespace tags
# ---------------------------------------------------------------------------


class Guid(FeedModel):
    value: Parsed[UUID] | None = None


class MediumTag(FeedModel):
    value: Parsed[Medium] | None = None


class Txt(FeedModel):
    value: str | None = None
    purpose: str | None = None


class Block(FeedModel):
    value: Parsed[bool] | None = None
    id: Parsed[Service] | None = None


class Locked(FeedModel):
    value: Parsed[bool] | None = None
    owner: str | None = None


class Funding(FeedModel):
    value: str | None = None
    url: Parsed[AnyUrl] | None = None


class Location(FeedModel):
    value: str | None = None
    geo: Parsed[Geo] | None = None
    osm: Parsed[Osm] | None = None


class Person(FeedModel):
    value: str | None = None
    group: Parsed[PersonGroup] | None = None
    role: Parsed[PersonRole] | None = None
    img: Parsed[AnyUrl] | None = None
    href: Parsed[AnyUrl] | None = None


class Trailer(FeedModel):
    value: str | None = None
    url: Parsed[AnyUrl] | None = None
    pub_date: Parsed[datetime] | None = None
    length: Parsed[int] | None = None
    type: Parsed[EnclosureMime] | None = None
    season: Parsed[int] | None = None


class License(FeedModel):
    """``Ok`` carries a recognised identifier, ``Other`` a custom license name."""

    value: Parsed[str] | None = None
    url: Parsed[AnyUrl] | None = None


class ValueRecipient(FeedModel):
    name: str | None = None
    custom_key: str | None = None
    custom_value: str | None = None
    type: Parsed[ValueRecipientType] | None = None
    address: str | None = None
    split: Parsed[int] | None = None
    fee: Parsed[bool] | None = None


class Value(FeedModel):
    type: Parsed[ValueType] | None = None
    method: Parsed[ValueMethod] | None = None
    suggested: Parsed[float] | None = None
    value_recipient: list[ValueRecipient] = []


class Images(FeedModel):
    srcset: Parsed[list[ImageSource]] | None = None


class Transcript(FeedModel):
    url: Parsed[AnyUrl] | None = None
    type: Parsed[TranscriptMime] | None = None
    language: Parsed[str] | None = None
    rel: Parsed[TranscriptRel] | None = None


class Chapters(FeedModel):
    url: Parsed[AnyUrl] | None = None
    type: Parsed[ChaptersMime] | None = None


class Soundbite(FeedModel):
    value: str | None = None
    start_time: Parsed[float] | None = None
    duration: Parsed[float] | None = None


class Season(FeedModel):
    value: Parsed[int] | None = None
    name: str | None = None


class Episode(FeedModel):
    value: Parsed[float] | None = None
    display: str | None = None


class Source(FeedModel):
    uri: Parsed[AnyUrl] | None = None
    content_type: str | None = None


class Integrity(FeedModel):
    type: Parsed[IntegrityType] | None = None
    value: str | None = None


class AlternateEnclosure(FeedModel):
    type: Parsed[EnclosureMime] | None = None
    length: Parsed[int] | None = None
    bitrate: Parsed[float] | None = None
    height: Parsed[int] | None = None
    lang: Parsed[str] | None = None
    title: str | None = None
    rel: str | None = None
    codecs: str | None = None
    default: Parsed[bool] | None = None
    source: list[Source] = []
    integrity: list[Integrity] = []


class SocialInteract(FeedModel):
    protocol: Parsed[SocialProtocol] | None = None
    uri: Parsed[AnyUrl] | None = None
    account_id: str | None = None
    account_url: Parsed[AnyUrl] | None = None
    priority: Parsed[int] | None = None


class ContentLink(FeedModel):
    value: str | None = None
    href: Parsed[AnyUrl] | None = None


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class Item(FeedModel):
    title: list[str] = []
    podcast_transcript: list[Transcript] = []
    podcast_chapters: list[Chapters] = []
    podcast_soundbite: list[Soundbite] = []
    podcast_person: list[Person] = []
    podcast_location: list[Location] = []
    podcast_season: list[Season] = []
    podcast_episode: list[Episode] = []
    podcast_license: list[License] = []
    podcast_alternate_enclosure: list[AlternateEnclosure] = []
    podcast_value: list[Value] = []
    podcast_images: list[Images] = []
    podcast_social_interact: list[SocialInteract] = []
    podcast_txt: list[Txt] = []


class LiveItem(Item):
    status: Parsed[LiveItemStatus] | None = None
    start: Parsed[datetime] | None = None
    end: Parsed[datetime] | None = None
    podcast_content_link: list[ContentLink] = []


class Channel(FeedModel):
    title: list[str] = []
    podcast_guid: list[Guid] = []
    podcast_medium: list[MediumTag] = []
    podcast_txt: list[Txt] = []
    podcast_block: list[Block] = []
    podcast_locked: list[Locked] = []
    podcast_funding: list[Funding] = []
    podcast_location: list[Location] = []
    podcast_person: list[Person] = []
    podcast_trailer: list[Trailer] = []
    podcast_license: list[License] = []
    podcast_value: list[Value] = []
    podcast_images: list[Images] = []
    item: list[Item] = []
    podcast_live_item: list[LiveItem] = []


class Document(FeedModel):
    """The ``<rss>`` root as handed over by the decoder."""

    channel: list[Channel] = []
