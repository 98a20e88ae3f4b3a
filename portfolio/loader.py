"""Content loading: five concurrent fragment fetches merged into one record.

The loader is all-or-nothing. Either every fragment is fetched and normalised
and a new :class:`PortfolioContent` is published to the :class:`ContentStore`,
or the load fails with :class:`LoadFailed` and no partial record is published.
"""

from __future__ import annotations
import asyncio
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, TypeAdapter, ValidationError

from portfolio import config
from portfolio.errors import FragmentUnavailable, LoadFailed
from portfolio.models import About, Article, GeneralInfo, PortfolioContent, Project, Skill, duplicate_ids
from portfolio.sources import FragmentSource, build_source

logger = logging.getLogger(__name__)

FRAGMENTS: Tuple[str, ...] = tuple(config.FRAGMENT_FILES)

OBJECT_FRAGMENTS: Dict[str, Type[BaseModel]] = {"general": GeneralInfo, "about": About}
LIST_FRAGMENTS: Dict[str, Type[BaseModel]] = {"skills": Skill, "projects": Project, "articles": Article}


# -----------------------------
# Store (loading -> ready/failed)
# -----------------------------
class ContentStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ContentSnapshot:
    status: ContentStatus
    content: Optional[PortfolioContent] = None
    last_error: Optional[LoadFailed] = None

    @property
    def ready(self) -> bool:
        return self.status is ContentStatus.READY and self.content is not None


class ContentStore:
    """Process-wide holder of the published content.

    Readers grab ``snapshot`` once and use it; publishing swaps the whole
    snapshot, so nobody sees a half-updated record.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = ContentSnapshot(ContentStatus.LOADING)

    @property
    def snapshot(self) -> ContentSnapshot:
        return self._snapshot

    def current(self) -> Optional[PortfolioContent]:
        return self._snapshot.content

    def publish(self, content: PortfolioContent) -> None:
        with self._lock:
            self._snapshot = ContentSnapshot(ContentStatus.READY, content)

    def publish_failure(self, error: LoadFailed) -> None:
        with self._lock:
            prev = self._snapshot
            if prev.ready:
                # refresh failed: keep serving what we had
                self._snapshot = ContentSnapshot(ContentStatus.READY, prev.content, error)
            else:
                self._snapshot = ContentSnapshot(ContentStatus.FAILED, None, error)


# -----------------------------
# Normalisation
# -----------------------------
def _list_payload(fragment: str, payload: Any) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        items = payload.get(fragment)
        if items is None:
            return []
        if isinstance(items, list):
            return items
    raise FragmentUnavailable(fragment, f"expected a list of {fragment}")


def normalize_fragment(fragment: str, payload: Any) -> Any:
    """Validate one decoded payload; raises FragmentUnavailable if malformed."""
    try:
        if fragment in OBJECT_FRAGMENTS:
            if not isinstance(payload, dict):
                raise FragmentUnavailable(fragment, "expected a JSON object")
            return OBJECT_FRAGMENTS[fragment].model_validate(payload)

        model = LIST_FRAGMENTS[fragment]
        items = TypeAdapter(Tuple[model, ...]).validate_python(_list_payload(fragment, payload))
    except ValidationError as e:
        raise FragmentUnavailable(fragment, f"{e.error_count()} invalid field(s)") from e

    if fragment != "skills":
        dupes = duplicate_ids(items)
        if dupes:
            raise FragmentUnavailable(fragment, f"duplicate ids {dupes}")
    return items


def assemble(parts: Dict[str, Any]) -> PortfolioContent:
    general: GeneralInfo = parts["general"]
    return PortfolioContent(
        name=general.name,
        tagline=general.tagline,
        bio=general.bio,
        contact=general.contact,
        skills=parts["skills"],
        projects=parts["projects"],
        articles=parts["articles"],
        about=parts["about"],
    )


# -----------------------------
# Loader
# -----------------------------
class ContentLoader:
    def __init__(self, source: Optional[FragmentSource] = None, store: Optional[ContentStore] = None):
        self.source = source if source is not None else build_source()
        self.store = store if store is not None else ContentStore()

    async def _fetch_one(self, fragment: str) -> Tuple[str, Any]:
        try:
            payload = await self.source.fetch(fragment)
            return fragment, normalize_fragment(fragment, payload)
        except FragmentUnavailable as e:
            logger.warning("Fragment %s unavailable: %s", fragment, e.reason or e)
            raise

    async def load(self) -> PortfolioContent:
        """Fetch all fragments concurrently and publish the merged content.

        Raises LoadFailed on the first fragment failure, once the remaining
        fetches have run to completion (nothing is cancelled). Calling again
        re-fetches everything and, on success, replaces the published content.
        """
        tasks = [asyncio.ensure_future(self._fetch_one(f)) for f in FRAGMENTS]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        first = next((t.exception() for t in tasks if t in done and t.exception() is not None), None)
        if pending:
            await asyncio.wait(pending)
        for t in tasks:
            t.exception()  # mark every outcome as retrieved

        if isinstance(first, FragmentUnavailable):
            failure = LoadFailed(first)
            self.store.publish_failure(failure)
            logger.error("Content load failed: %s", first)
            raise failure from first
        if first is not None:
            raise first

        content = assemble(dict(t.result() for t in tasks))
        self.store.publish(content)
        logger.info(
            "Content loaded: %d skills, %d projects, %d articles",
            len(content.skills), len(content.projects), len(content.articles),
        )
        return content

    def load_sync(self) -> PortfolioContent:
        return asyncio.run(self.load())
