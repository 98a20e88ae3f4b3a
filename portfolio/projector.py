"""View projection: (content, navigation state) -> what to render.

``project`` is pure: it reads its inputs, never mutates them and does no I/O.
The presentation layer only ever sees the returned ``ViewDescriptor``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from portfolio import config
from portfolio.loader import ContentSnapshot, ContentStatus
from portfolio.markup import article_body
from portfolio.models import About, Article, Contact, PortfolioContent, Project, Skill
from portfolio.navigation import SECTION_LABELS, NavigationState, Section


class ViewKind(str, Enum):
    LOADING = "loading"
    UNAVAILABLE = "unavailable"
    HERO = "hero"
    ABOUT = "about"
    SKILLS = "skills"
    PROJECTS = "projects"
    ARTICLE_LIST = "article_list"
    ARTICLE_DETAIL = "article_detail"
    CONTACT = "contact"


# -----------------------------
# Section views
# -----------------------------
@dataclass(frozen=True)
class Placeholder:
    kind: ViewKind
    message: str


@dataclass(frozen=True)
class HeroView:
    name: str
    tagline: str
    bio: str
    actions: Tuple[Tuple[str, Section], ...] = ()
    kind: ViewKind = field(default=ViewKind.HERO, init=False)


@dataclass(frozen=True)
class AboutView:
    name: str
    about: About
    kind: ViewKind = field(default=ViewKind.ABOUT, init=False)


@dataclass(frozen=True)
class SkillsView:
    skills: Tuple[Skill, ...]
    kind: ViewKind = field(default=ViewKind.SKILLS, init=False)


@dataclass(frozen=True)
class ProjectsView:
    # image/link stay Optional; renderers substitute their own placeholder
    projects: Tuple[Project, ...]
    kind: ViewKind = field(default=ViewKind.PROJECTS, init=False)


@dataclass(frozen=True)
class ArticleListView:
    articles: Tuple[Article, ...]
    kind: ViewKind = field(default=ViewKind.ARTICLE_LIST, init=False)


@dataclass(frozen=True)
class ArticleDetailView:
    article: Article
    body_html: str
    kind: ViewKind = field(default=ViewKind.ARTICLE_DETAIL, init=False)


@dataclass(frozen=True)
class ContactView:
    contact: Contact
    kind: ViewKind = field(default=ViewKind.CONTACT, init=False)


SectionView = Union[
    Placeholder, HeroView, AboutView, SkillsView, ProjectsView,
    ArticleListView, ArticleDetailView, ContactView,
]


# -----------------------------
# Chrome (nav bar + footer)
# -----------------------------
@dataclass(frozen=True)
class NavItem:
    label: str
    section: Section
    active: bool = False


@dataclass(frozen=True)
class Footer:
    name: str
    tagline: str
    email: str
    phone: str
    address: str
    links: Tuple[NavItem, ...]


@dataclass(frozen=True)
class Chrome:
    brand: str
    initials: str
    nav: Tuple[NavItem, ...]
    menu_open: bool
    show_menu_toggle: bool
    footer: Footer


@dataclass(frozen=True)
class ViewDescriptor:
    section: Optional[Section]
    views: Tuple[SectionView, ...]
    chrome: Optional[Chrome] = None

    @property
    def kinds(self) -> Tuple[ViewKind, ...]:
        return tuple(v.kind for v in self.views)

    @property
    def is_placeholder(self) -> bool:
        return self.chrome is None


def initials(name: str) -> str:
    return "".join(word[0] for word in name.split()[:2]).upper()


def _chrome(content: PortfolioContent, nav: NavigationState, section: Section, compact_nav: bool) -> Chrome:
    items = tuple(NavItem(label, s, s is section) for s, label in SECTION_LABELS.items())
    footer = Footer(
        name=content.name,
        tagline=content.tagline,
        email=content.contact.email,
        phone=content.contact.phone,
        address=content.contact.address,
        links=tuple(NavItem(label, s) for s, label in SECTION_LABELS.items()),
    )
    return Chrome(
        brand=content.name,
        initials=initials(content.name),
        nav=items,
        menu_open=bool(nav.menu_open),
        show_menu_toggle=compact_nav,
        footer=footer,
    )


def _home(content: PortfolioContent) -> Tuple[SectionView, ...]:
    hero = HeroView(
        name=content.name,
        tagline=content.tagline,
        bio=content.bio,
        actions=tuple((label, Section(target)) for label, target in config.HERO_ACTIONS),
    )
    return (
        hero,
        AboutView(content.name, content.about),
        SkillsView(content.skills),
        ProjectsView(content.projects),
    )


def _blog(content: PortfolioContent, nav: NavigationState, trust_markup: bool) -> SectionView:
    if nav.selected_article is not None:
        article = content.article(nav.selected_article)
        if article is not None:
            return ArticleDetailView(article, article_body(article.content, trusted=trust_markup))
    return ArticleListView(content.articles)


def _placeholder(status: ContentStatus) -> ViewDescriptor:
    if status is ContentStatus.FAILED:
        view = Placeholder(ViewKind.UNAVAILABLE, config.UNAVAILABLE_LABEL)
    else:
        view = Placeholder(ViewKind.LOADING, config.LOADING_LABEL)
    return ViewDescriptor(section=None, views=(view,))


def project(
    content: Union[PortfolioContent, ContentSnapshot, None],
    nav: NavigationState,
    *,
    trust_markup: bool = config.TRUST_ARTICLE_MARKUP,
    compact_nav: bool = config.COMPACT_NAV,
) -> ViewDescriptor:
    """Describe what to render for ``content`` under navigation state ``nav``.

    ``content`` may be a ready record, a store snapshot or None (still
    loading). Anything not ready yields a placeholder, whatever ``nav`` says.
    """
    if isinstance(content, ContentSnapshot):
        if not content.ready:
            return _placeholder(content.status)
        content = content.content
    if content is None:
        return _placeholder(ContentStatus.LOADING)

    try:
        section = Section(nav.active_section)
    except ValueError:
        section = Section.HOME

    if section is Section.SKILLS:
        views: Tuple[SectionView, ...] = (SkillsView(content.skills),)
    elif section is Section.PROJECTS:
        views = (ProjectsView(content.projects),)
    elif section is Section.BLOG:
        views = (_blog(content, nav, trust_markup),)
    elif section is Section.ABOUT:
        views = (AboutView(content.name, content.about),)
    elif section is Section.CONTACT:
        views = (ContactView(content.contact),)
    else:
        views = _home(content)

    return ViewDescriptor(section=section, views=views, chrome=_chrome(content, nav, section, compact_nav))
