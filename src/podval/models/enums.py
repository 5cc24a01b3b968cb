"""Closed vocabularies recognised by the feed decoder.

Member values are the exact strings found in feeds; anything outside a
vocabulary reaches the validator as ``Other``.
"""

from __future__ import annotations

from enum import StrEnum


class Medium(StrEnum):
    PODCAST = "podcast"
    MUSIC = "music"
    VIDEO = "video"
    FILM = "film"
    AUDIOBOOK = "audiobook"
    NEWSLETTER = "newsletter"
    BLOG = "blog"
    PUBLISHER = "publisher"
    COURSE = "course"
    MIXED = "mixed"
    # List variants
    PODCAST_LIST = "podcastL"
    MUSIC_LIST = "musicL"
    VIDEO_LIST = "videoL"
    FILM_LIST = "filmL"
    AUDIOBOOK_LIST = "audiobookL"
    NEWSLETTER_LIST = "newsletterL"
    BLOG_LIST = "blogL"
    PUBLISHER_LIST = "publisherL"
    COURSE_LIST = "courseL"


class Service(StrEnum):
    """Platform slugs used by ``podcast:block id``."""

    ACAST = "acast"
    AMAZON = "amazon"
    ANCHOR = "anchor"
    APPLE = "apple"
    AUDIBLE = "audible"
    AUDIOBOOM = "audioboom"
    BACKTRACKS = "backtracks"
    BITCOIN = "bitcoin"
    BLUBRRY = "blubrry"
    BUZZSPROUT = "buzzsprout"
    CAPTIVATE = "captivate"
    CASTOS = "castos"
    CASTOPOD = "castopod"
    FACEBOOK = "facebook"
    FIRESIDE = "fireside"
    FYYD = "fyyd"
    GOOGLE = "google"
    GPODDER = "gpodder"
    HYPERCATCHER = "hypercatcher"
    KASTS = "kasts"
    LIBSYN = "libsyn"
    MASTODON = "mastodon"
    MEGAFONO = "megafono"
    MEGAPHONE = "megaphone"
    OMNYSTUDIO = "omnystudio"
    OVERCAST = "overcast"
    PAYPAL = "paypal"
    PINECAST = "pinecast"
    PODBEAN = "podbean"
    PODCASTADDICT = "podcastaddict"
    PODCASTGURU = "podcastguru"
    PODCASTINDEX = "podcastindex"
    PODCASTS = "podcasts"
    PODCHASER = "podchaser"
    PODCLOUD = "podcloud"
    PODFRIEND = "podfriend"
    PODIANT = "podiant"
    PODIGEE = "podigee"
    PODNEWS = "podnews"
    PODOMATIC = "podomatic"
    PODSERVE = "podserve"
    PODVERSE = "podverse"
    REDCIRCLE = "redcircle"
    RELAY = "relay"
    RESONATERECORDINGS = "resonaterecordings"
    RSS = "rss"
    SHOUTENGINE = "shoutengine"
    SIMPLECAST = "simplecast"
    SLACK = "slack"
    SOUNDCLOUD = "soundcloud"
    SPOTIFY = "spotify"
    SPREAKER = "spreaker"
    TIKTOK = "tiktok"
    TRANSISTOR = "transistor"
    TWITTER = "twitter"
    WHOOSHKAA = "whooshkaa"
    YOUTUBE = "youtube"
    ZENCAST = "zencast"


class PersonGroup(StrEnum):
    CREATIVE_DIRECTION = "creative direction"
    CAST = "cast"
    WRITING = "writing"
    AUDIO_PRODUCTION = "audio production"
    AUDIO_POST_PRODUCTION = "audio post-production"
    ADMINISTRATION = "administration"
    VISUALS = "visuals"
    COMMUNITY = "community"
    MISC = "misc."
    VIDEO_PRODUCTION = "video production"


class PersonRole(StrEnum):
    DIRECTOR = "director"
    ASSISTANT_DIRECTOR = "assistant director"
    EXECUTIVE_PRODUCER = "executive producer"
    SENIOR_PRODUCER = "senior producer"
    PRODUCER = "producer"
    ASSOCIATE_PRODUCER = "associate producer"
    DEVELOPMENT_PRODUCER = "development producer"
    CREATIVE_DIRECTOR = "creative director"
    HOST = "host"
    CO_HOST = "co-host"
    GUEST_HOST = "guest host"
    GUEST = "guest"
    VOICE_ACTOR = "voice actor"
    NARRATOR = "narrator"
    ANNOUNCER = "announcer"
    REPORTER = "reporter"
    AUTHOR = "author"
    EDITORIAL_DIRECTOR = "editorial director"
    CO_WRITER = "co-writer"
    WRITER = "writer"
    SONGWRITER = "songwriter"
    GUEST_WRITER = "guest writer"
    STORY_EDITOR = "story editor"
    MANAGING_EDITOR = "managing editor"
    SCRIPT_EDITOR = "script editor"
    SCRIPT_COORDINATOR = "script coordinator"
    RESEARCHER = "researcher"
    EDITOR = "editor"
    FACT_CHECKER = "fact checker"
    TRANSLATOR = "translator"
    TRANSCRIBER = "transcriber"
    LOGGER = "logger"
    STUDIO_COORDINATOR = "studio coordinator"
    TECHNICAL_DIRECTOR = "technical director"
    TECHNICAL_MANAGER = "technical manager"
    AUDIO_ENGINEER = "audio engineer"
    REMOTE_RECORDING_ENGINEER = "remote recording engineer"
    POST_PRODUCTION_ENGINEER = "post production engineer"
    AUDIO_EDITOR = "audio editor"
    SOUND_DESIGNER = "sound designer"
    FOLEY_ARTIST = "foley artist"
    COMPOSER = "composer"
    THEME_MUSIC = "theme music"
    MUSIC_PRODUCTION = "music production"
    MUSIC_CONTRIBUTOR = "music contributor"
    PRODUCTION_COORDINATOR = "production coordinator"
    BOOKING_COORDINATOR = "booking coordinator"
    PRODUCTION_ASSISTANT = "production assistant"
    CONTENT_MANAGER = "content manager"
    MARKETING_MANAGER = "marketing manager"
    SALES_REPRESENTATIVE = "sales representative"
    SALES_MANAGER = "sales manager"
    GRAPHIC_DESIGNER = "graphic designer"
    COVER_ART_DESIGNER = "cover art designer"
    SOCIAL_MEDIA_MANAGER = "social media manager"
    CONSULTANT = "consultant"
    INTERN = "intern"
    CAMERA_OPERATOR = "camera operator"
    LIGHTING_DESIGNER = "lighting designer"
    CAMERA_GRIP = "camera grip"
    ASSISTANT_CAMERA = "assistant camera"


class ValueType(StrEnum):
    LIGHTNING = "lightning"
    HIVE = "hive"
    WEBMONETIZATION = "webmonetization"


class ValueMethod(StrEnum):
    KEYSEND = "keysend"
    AMP = "amp"


class ValueRecipientType(StrEnum):
    NODE = "node"
    LNADDRESS = "lnaddress"
    WALLET = "wallet"


class EnclosureMime(StrEnum):
    AUDIO_MPEG = "audio/mpeg"
    AUDIO_MP4 = "audio/mp4"
    AUDIO_M4A = "audio/x-m4a"
    AUDIO_AAC = "audio/aac"
    AUDIO_OGG = "audio/ogg"
    AUDIO_OPUS = "audio/opus"
    AUDIO_FLAC = "audio/flac"
    AUDIO_WAV = "audio/wav"
    VIDEO_MP4 = "video/mp4"
    VIDEO_M4V = "video/x-m4v"
    VIDEO_QUICKTIME = "video/quicktime"
    VIDEO_WEBM = "video/webm"
    HLS = "application/x-mpegURL"
    HLS_APPLE = "application/vnd.apple.mpegurl"
    DASH = "application/dash+xml"
    PDF = "application/pdf"
    EPUB = "document/x-epub"


class TranscriptMime(StrEnum):
    PLAIN = "text/plain"
    HTML = "text/html"
    VTT = "text/vtt"
    JSON = "application/json"
    SRT = "application/x-subrip"
    # Recognised only so it can be reported; superseded by SRT.
    LEGACY_SRT = "application/srt"


class TranscriptRel(StrEnum):
    CAPTIONS = "captions"


class ChaptersMime(StrEnum):
    JSON_CHAPTERS = "application/json+chapters"


class OsmType(StrEnum):
    NODE = "node"
    WAY = "way"
    RELATION = "relation"


class LiveItemStatus(StrEnum):
    PENDING = "pending"
    LIVE = "live"
    ENDED = "ended"


class SocialProtocol(StrEnum):
    DISABLED = "disabled"
    ACTIVITYPUB = "activitypub"
    TWITTER = "twitter"
    LIGHTNING = "lightning"
    ATPROTO = "atproto"
    NOSTR = "nostr"


class IntegrityType(StrEnum):
    SRI = "sri"
    PGP_SIGNATURE = "pgp-signature"
