"""Typed document model consumed by the validator."""

from podval.models.feed import (
    AlternateEnclosure,
    Block,
    Channel,
    Chapters,
    ContentLink,
    Document,
    Episode,
    Funding,
    Geo,
    Guid,
    Images,
    ImageSource,
    Integrity,
    Item,
    License,
    LiveItem,
    Location,
    Locked,
    MediumTag,
    Osm,
    Person,
    Season,
    SocialInteract,
    Soundbite,
    Source,
    Trailer,
    Transcript,
    Txt,
    Value,
    ValueRecipient,
)
from podval.models.parsed import Ok, Other, Parsed

__all__ = [
    "AlternateEnclosure",
    "Block",
    "Channel",
    "Chapters",
    "ContentLink",
    "Document",
    "Episode",
    "Funding",
    "Geo",
    "Guid",
    "ImageSource",
    "Images",
    "Integrity",
    "Item",
    "License",
    "LiveItem",
    "Location",
    "Locked",
    "MediumTag",
    "Ok",
    "Osm",
    "Other",
    "Parsed",
    "Person",
    "Season",
    "SocialInteract",
    "Soundbite",
    "Source",
    "Trailer",
    "Transcript",
    "Txt",
    "Value",
    "ValueRecipient",
]
