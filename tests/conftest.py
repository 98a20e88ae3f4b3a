"""Shared fixtures: fragment payloads and an in-memory fragment source."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Optional

import pytest

from portfolio.errors import FragmentUnavailable
from portfolio.models import PortfolioContent

PAYLOADS: Dict[str, Any] = {
    "general": {
        "name": "Jana Novak",
        "tagline": "Frontend developer",
        "bio": "Builds interfaces.",
        "contact": {
            "email": "jana@example.com",
            "phone": "+420 777 000 111",
            "address": "Brno",
            "github": "https://github.com/jana",
            "linkedin": "https://linkedin.com/in/jana",
        },
    },
    "skills": [
        {"name": "React", "level": 85},
        {"name": "CSS", "level": 95},
        {"name": "Python", "level": 60},
    ],
    "projects": [
        {"id": 1, "title": "Cafe", "description": "Cafe site", "technologies": ["React"],
         "image": "https://img.example.com/cafe.png", "link": "https://example.com/cafe"},
        {"id": 2, "title": "Library", "description": "No public link", "technologies": []},
    ],
    "articles": [
        {"id": 1, "title": "First", "date": "2025-01-01", "readTime": "3 min",
         "excerpt": "Intro", "content": "<p>Hello</p>"},
        {"id": 2, "title": "Second", "date": "2025-02-01", "readTime": "5 min",
         "excerpt": "More", "content": "<p>World</p><script>alert(1)</script>"},
    ],
    "about": {"text": "About me."},
}


class FakeSource:
    """Serves copies of ``payloads``; fragments named in ``fail`` raise."""

    def __init__(self, payloads: Optional[Dict[str, Any]] = None, fail: Iterable[str] = ()):
        self.payloads = copy.deepcopy(PAYLOADS if payloads is None else payloads)
        self.fail = set(fail)
        self.calls = []

    async def fetch(self, fragment: str) -> Any:
        self.calls.append(fragment)
        if fragment in self.fail:
            raise FragmentUnavailable(fragment, "HTTP 500")
        return copy.deepcopy(self.payloads[fragment])


@pytest.fixture
def payloads() -> Dict[str, Any]:
    return copy.deepcopy(PAYLOADS)


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def content() -> PortfolioContent:
    general = PAYLOADS["general"]
    return PortfolioContent(
        name=general["name"],
        tagline=general["tagline"],
        bio=general["bio"],
        contact=general["contact"],
        skills=PAYLOADS["skills"],
        projects=PAYLOADS["projects"],
        articles=PAYLOADS["articles"],
        about=PAYLOADS["about"],
    )
