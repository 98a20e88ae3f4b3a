"""Navigation state machine: active section, mobile menu, selected article."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from portfolio import config
from portfolio.models import ItemId, PortfolioContent

logger = logging.getLogger(__name__)


class Section(str, Enum):
    HOME = "home"
    SKILLS = "skills"
    PROJECTS = "projects"
    BLOG = "blog"
    ABOUT = "about"
    CONTACT = "contact"


# Fixed bidirectional mapping; order is nav order
SECTION_LABELS: Dict[Section, str] = {Section(key): label for key, label in config.SECTION_LABELS.items()}
LABEL_SECTIONS: Dict[str, Section] = {label: section for section, label in SECTION_LABELS.items()}


def label_for(section: Section) -> str:
    return SECTION_LABELS[Section(section)]


def section_for_label(label: str) -> Section:
    return LABEL_SECTIONS[label]


@dataclass
class NavigationState:
    active_section: Section = Section.HOME
    menu_open: bool = False
    selected_article: Optional[ItemId] = None


ContentProvider = Callable[[], Optional[PortfolioContent]]


class Navigator:
    """The only mutator of a NavigationState.

    ``content`` returns the currently published content (or None while
    loading); it is consulted by ``open_article`` to reject unknown ids.
    """

    def __init__(self, state: Optional[NavigationState] = None, content: Optional[ContentProvider] = None):
        self.state = state if state is not None else NavigationState()
        self._content = content or (lambda: None)

    def navigate_to(self, section: Union[Section, str]) -> None:
        # selected_article is kept; the projector only shows it under blog
        self.state.active_section = Section(section)
        self.state.menu_open = False

    def toggle_menu(self) -> None:
        self.state.menu_open = not self.state.menu_open

    def open_article(self, article_id: ItemId) -> bool:
        content = self._content()
        if content is None or not content.has_article(article_id):
            logger.debug("open_article(%r) ignored: not in loaded articles", article_id)
            return False
        self.state.selected_article = article_id
        self.state.active_section = Section.BLOG
        return True

    def close_article(self) -> None:
        self.state.selected_article = None

    back = close_article

    def prune(self, content: PortfolioContent) -> None:
        """Drop a selection that no longer exists after a content refresh."""
        selected = self.state.selected_article
        if selected is not None and not content.has_article(selected):
            logger.info("Selected article %r vanished after refresh; clearing", selected)
            self.state.selected_article = None
