from portfolio.errors import FragmentUnavailable, LoadError, LoadFailed
from portfolio.loader import ContentLoader, ContentSnapshot, ContentStatus, ContentStore
from portfolio.models import About, Article, Contact, PortfolioContent, Project, Skill
from portfolio.navigation import NavigationState, Navigator, Section
from portfolio.projector import ViewDescriptor, ViewKind, project

__all__ = [
    "About", "Article", "Contact", "ContentLoader", "ContentSnapshot", "ContentStatus",
    "ContentStore", "FragmentUnavailable", "LoadError", "LoadFailed", "NavigationState",
    "Navigator", "PortfolioContent", "Project", "Section", "Skill", "ViewDescriptor",
    "ViewKind", "project",
]
