"""Analyzers for attribute-only tags.

Each ``analyze_<tag>`` takes one decoded tag and returns its ``Node``. None of
them raise: whatever is wrong with the tag ends up in ``Node.errors``.
"""

from __future__ import annotations

from podval.analyzer.builder import NodeBuilder
from podval.analyzer.limits import MAX_LABEL_LENGTH, MAX_TEXT_LENGTH, MAX_TXT_LENGTH
from podval.diagnostics.errors import CustomWithExtraInfo, MissingAttribute
from podval.diagnostics.nodes import NODE_VALUE, Node, Object, TagName
from podval.models.enums import SocialProtocol, TranscriptMime
from podval.models.feed import (
    Block,
    Chapters,
    ContentLink,
    Episode,
    Funding,
    Guid,
    License,
    Locked,
    MediumTag,
    Person,
    Season,
    SocialInteract,
    Soundbite,
    Trailer,
    Transcript,
    Txt,
)
from podval.models.parsed import Ok, Other

TITLE = TagName.rss("title")
GUID = TagName.podcast("guid")
MEDIUM = TagName.podcast("medium")
TXT = TagName.podcast("txt")
BLOCK = TagName.podcast("block")
LOCKED = TagName.podcast("locked")
FUNDING = TagName.podcast("funding")
PERSON = TagName.podcast("person")
TRAILER = TagName.podcast("trailer")
LICENSE = TagName.podcast("license")
TRANSCRIPT = TagName.podcast("transcript")
CHAPTERS = TagName.podcast("chapters")
SOUNDBITE = TagName.podcast("soundbite")
SEASON = TagName.podcast("season")
EPISODE = TagName.podcast("episode")
SOCIAL_INTERACT = TagName.podcast("socialInteract")
CONTENT_LINK = TagName.podcast("contentLink")

LEGACY_SRT_MESSAGE = f"Deprecated transcript type «{TranscriptMime.LEGACY_SRT}»"
LEGACY_SRT_EXTRA_INFO = (
    f"In 2023 the podcast namespace documentation replaced «{TranscriptMime.LEGACY_SRT}» "
    f"with «{TranscriptMime.SRT}», the registered MIME type for SubRip captions. "
    f"Apps that follow the current documentation may ignore transcripts declared "
    f"with the old value."
)


def analyze_title(title: str) -> Node:
    return NodeBuilder(TITLE).text(NODE_VALUE, title).build()


def analyze_guid(guid: Guid) -> Node:
    return NodeBuilder(GUID).parsed(NODE_VALUE, guid.value, required=True).build()


def analyze_medium(medium: MediumTag) -> Node:
    return NodeBuilder(MEDIUM).parsed(NODE_VALUE, medium.value, required=True).build()


def analyze_txt(txt: Txt) -> Node:
    return (
        NodeBuilder(TXT)
        .text(NODE_VALUE, txt.value, required=True, max_length=MAX_TXT_LENGTH)
        .text("purpose", txt.purpose, max_length=MAX_TEXT_LENGTH)
        .build()
    )


def analyze_block(block: Block) -> Node:
    return (
        NodeBuilder(BLOCK)
        .parsed(NODE_VALUE, block.value, required=True)
        .parsed("id", block.id)
        .build()
    )


def analyze_locked(locked: Locked) -> Node:
    return (
        NodeBuilder(LOCKED)
        .parsed(NODE_VALUE, locked.value, required=True)
        .text("owner", locked.owner)
        .build()
    )


def analyze_funding(funding: Funding) -> Node:
    return (
        NodeBuilder(FUNDING)
        .text(NODE_VALUE, funding.value, required=True, max_length=MAX_TEXT_LENGTH)
        .url("url", funding.url, required=True)
        .build()
    )


def analyze_person(person: Person) -> Node:
    return (
        NodeBuilder(PERSON)
        .text(NODE_VALUE, person.value, required=True, max_length=MAX_TEXT_LENGTH)
        .parsed("group", person.group)
        .parsed("role", person.role)
        .url("img", person.img)
        .url("href", person.href)
        .build()
    )


def analyze_trailer(trailer: Trailer) -> Node:
    return (
        NodeBuilder(TRAILER)
        .text(NODE_VALUE, trailer.value, required=True, max_length=MAX_TEXT_LENGTH)
        .url("url", trailer.url, required=True)
        .parsed("pubDate", trailer.pub_date, required=True)
        .parsed("length", trailer.length)
        .parsed("type", trailer.type)
        .parsed("season", trailer.season)
        .build()
    )


def analyze_license(license_: License) -> Node:
    """A recognised identifier stands alone; a custom license needs a ``url``.

    For this tag ``Other`` is not a rejection: it carries the custom license
    name, which is free text.
    """
    builder = NodeBuilder(LICENSE)
    match license_.value:
        case Ok(value=identifier):
            builder.attribute(NODE_VALUE, Object(identifier))
        case Other(raw=custom):
            builder.text(NODE_VALUE, custom, max_length=MAX_TEXT_LENGTH)
            if license_.url is None:
                builder.error(MissingAttribute("url"))
        case None:
            builder.error(MissingAttribute(NODE_VALUE))
    return builder.url("url", license_.url).build()


def analyze_transcript(transcript: Transcript) -> Node:
    builder = NodeBuilder(TRANSCRIPT).url("url", transcript.url, required=True)
    match transcript.type:
        case Ok(value=TranscriptMime.LEGACY_SRT):
            builder.error(CustomWithExtraInfo(LEGACY_SRT_MESSAGE, LEGACY_SRT_EXTRA_INFO))
        case _:
            builder.parsed("type", transcript.type, required=True)
    return (
        builder.parsed("language", transcript.language)
        .parsed("rel", transcript.rel)
        .build()
    )


def analyze_chapters(chapters: Chapters) -> Node:
    return (
        NodeBuilder(CHAPTERS)
        .url("url", chapters.url, required=True)
        .parsed("type", chapters.type, required=True)
        .build()
    )


def analyze_soundbite(soundbite: Soundbite) -> Node:
    return (
        NodeBuilder(SOUNDBITE)
        .parsed("startTime", soundbite.start_time, required=True)
        .parsed("duration", soundbite.duration, required=True)
        .text(NODE_VALUE, soundbite.value, max_length=MAX_TEXT_LENGTH)
        .build()
    )


def analyze_season(season: Season) -> Node:
    return (
        NodeBuilder(SEASON)
        .parsed(NODE_VALUE, season.value, required=True)
        .text("name", season.name, max_length=MAX_TEXT_LENGTH)
        .build()
    )


def analyze_episode(episode: Episode) -> Node:
    return (
        NodeBuilder(EPISODE)
        .parsed(NODE_VALUE, episode.value, required=True)
        .text("display", episode.display, max_length=MAX_LABEL_LENGTH)
        .build()
    )


def analyze_social_interact(social: SocialInteract) -> Node:
    """``uri`` may only be left out when commenting is explicitly disabled."""
    disabled = social.protocol == Ok(SocialProtocol.DISABLED)
    return (
        NodeBuilder(SOCIAL_INTERACT)
        .parsed("protocol", social.protocol, required=True)
        .url("uri", social.uri, required=not disabled)
        .text("accountId", social.account_id)
        .url("accountUrl", social.account_url)
        .parsed("priority", social.priority)
        .build()
    )


def analyze_content_link(link: ContentLink) -> Node:
    return (
        NodeBuilder(CONTENT_LINK)
        .url("href", link.href, required=True)
        .text(NODE_VALUE, link.value)
        .build()
    )
