"""Shared test fixtures for the podval validator."""

from __future__ import annotations

from pathlib import Path

import pytest

from podval.loader import DocumentLoader
from podval.models.feed import Document

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture
def sample_document(loader: DocumentLoader) -> Document:
    """A clean feed exercising most namespace tags."""
    return loader.load_string(SAMPLE_DOCUMENT_YAML)


SAMPLE_DOCUMENT_YAML = """\
channel:
  - title: [Podcasting 2.0]
    podcast_guid:
      - value: {value: "917393e3-1b1e-5cef-ace4-edaa54e1f810"}
    podcast_medium:
      - value: {value: podcast}
    podcast_locked:
      - value: {value: true}
        owner: feeds@example.com
    podcast_funding:
      - value: Support the show!
        url: {value: "https://example.com/donate"}
    podcast_person:
      - value: Adam Curry
        role: {value: host}
        href: {value: "https://example.com/people/adam"}
    podcast_location:
      - value: Austin, TX
        geo: {value: {latitude: 30.2672, longitude: 97.7431}}
        osm: {value: {type: relation, id: 113314}}
    podcast_license:
      - value: {value: cc-by-4.0}
    podcast_value:
      - type: {value: lightning}
        method: {value: keysend}
        value_recipient:
          - name: Host
            type: {value: node}
            address: "03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a"
            split: {value: 99}
          - name: Podcastindex.org
            type: {value: node}
            address: "03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a"
            split: {value: 1}
            fee: {value: true}
    item:
      - title: [Episode 1]
        podcast_transcript:
          - url: {value: "https://example.com/episode1/transcript.vtt"}
            type: {value: text/vtt}
        podcast_chapters:
          - url: {value: "https://example.com/episode1/chapters.json"}
            type: {value: application/json+chapters}
        podcast_season:
          - value: {value: 1}
            name: Genesis
        podcast_episode:
          - value: {value: 1}
            display: Ch 1
        podcast_soundbite:
          - start_time: {value: 73.0}
            duration: {value: 60.0}
"""

NO_NAMESPACE_DOCUMENT_YAML = """\
channel:
  - title: [Plain RSS]
    item:
      - title: [Episode 1]
"""
