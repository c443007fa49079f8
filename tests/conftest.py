"""Shared test fixtures for the childes_cleaner test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from childes_cleaner.parser import TranscriptParser

# ---------------------------------------------------------------------------
# Sample transcripts
# ---------------------------------------------------------------------------

SESSION_ONE = """<?xml version="1.0" encoding="UTF-8"?>
<CHAT xmlns="http://www.talkbank.org/ns/talkbank" Corpus="Suppes" Lang="eng">
  <Participants>
    <participant id="CHI" name="Nina" role="Target_Child"/>
    <participant id="MOT" role="Mother"/>
  </Participants>
  <u who="CHI" uID="u0"><w>hi</w><t type="p"/></u>
  <u who="MOT" uID="u1"><w>hello</w><w>Nina</w><t type="q"/></u>
  <u who="CHI" uID="u2"><t type="p"/></u>
  <u who="CHI" uID="u3"><w>wha<shortening>t</shortening>'s</w><w>that</w><t type="q"/></u>
  <u who="CHI" uID="u4">
    <g><w>my</w><w>ball</w><k type="retracing"/></g>
    <w>my</w><w>ball</w><t type="p"/>
  </u>
  <u who="CHI" uID="u5"><w untranscribed="unintelligible">xxx</w><w>dog</w><t type="p"/></u>
  <u who="CHI" uID="u6"><w>ice<wk type="cmp"/>cream</w><pause/><w>no<p type="drawl"/>o</w><t type="e"/></u>
  <u who="CHI" uID="u7">
    <w>gonna<replacement><w>going</w><w>to</w></replacement></w>
    <w>teddy_bear</w>
    <t type="p"/>
  </u>
</CHAT>
"""

SESSION_ONE_CHI = ["hi .", "what's that ?", "icecream , noo !", "going teddy bear ."]
SESSION_ONE_MOT = ["hello Nina ?"]

SESSION_TWO = """<?xml version="1.0" encoding="UTF-8"?>
<CHAT xmlns="http://www.talkbank.org/ns/talkbank" Corpus="Suppes" Lang="eng">
  <u who="CHI" uID="u0"><w>more</w><w>juice</w><t type="e"/></u>
  <u who="MOT" uID="u1"><w>okay</w><t type="p"/></u>
</CHAT>
"""

MALFORMED_COMPOUND = """<CHAT>
  <u who="CHI"><w>ice<wk type="cmp"/></w><t type="p"/></u>
</CHAT>
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def parser() -> TranscriptParser:
    return TranscriptParser()


@pytest.fixture()
def session_one() -> str:
    return SESSION_ONE


@pytest.fixture()
def corpus_dir(tmp_path: Path) -> Path:
    """A corpus directory with two sessions and a stray non-XML file."""
    d = tmp_path / "Nina"
    d.mkdir()
    (d / "010101.xml").write_text(SESSION_ONE, encoding="utf-8")
    (d / "010102.xml").write_text(SESSION_TWO, encoding="utf-8")
    (d / "notes.txt").write_text("not a transcript", encoding="utf-8")
    return d


@pytest.fixture()
def session_two() -> str:
    return SESSION_TWO


@pytest.fixture()
def malformed_compound() -> str:
    return MALFORMED_COMPOUND


@pytest.fixture()
def expected_child_lines() -> list[str]:
    return SESSION_ONE_CHI + ["more juice !"]


@pytest.fixture()
def expected_mother_lines() -> list[str]:
    return SESSION_ONE_MOT + ["okay ."]
