"""Tests for ``portfolio.navigation`` — the section/menu/article state machine."""

from __future__ import annotations

import dataclasses

import pytest

from portfolio.models import PortfolioContent
from portfolio.navigation import (
    SECTION_LABELS, NavigationState, Navigator, Section, label_for, section_for_label,
)


@pytest.fixture
def nav(content):
    return Navigator(content=lambda: content)


class TestInitialState:
    def test_defaults(self):
        state = NavigationState()
        assert state == NavigationState(Section.HOME, False, None)

    def test_navigator_creates_state(self):
        assert Navigator().state.active_section is Section.HOME


class TestNavigateTo:
    def test_sets_section_and_closes_menu(self, nav):
        nav.toggle_menu()
        nav.navigate_to(Section.PROJECTS)
        assert nav.state.active_section is Section.PROJECTS
        assert nav.state.menu_open is False

    def test_idempotent_apart_from_menu(self, nav):
        nav.navigate_to(Section.SKILLS)
        before = dataclasses.replace(nav.state)
        nav.toggle_menu()
        nav.navigate_to(Section.SKILLS)
        assert nav.state == before

    def test_accepts_section_value(self, nav):
        nav.navigate_to("contact")
        assert nav.state.active_section is Section.CONTACT

    def test_rejects_unknown_section(self, nav):
        with pytest.raises(ValueError):
            nav.navigate_to("gallery")

    def test_leaving_blog_keeps_selection(self, nav):
        nav.open_article(2)
        nav.navigate_to(Section.ABOUT)
        assert nav.state.selected_article == 2
        nav.navigate_to(Section.BLOG)
        assert nav.state.selected_article == 2


class TestToggleMenu:
    @pytest.mark.parametrize("times,expected", [(1, True), (2, False), (3, True), (10, False)])
    def test_pairs_cancel_out(self, nav, times, expected):
        for _ in range(times):
            nav.toggle_menu()
        assert nav.state.menu_open is expected


class TestArticles:
    def test_open_known_article(self, nav):
        assert nav.open_article(1) is True
        assert nav.state.active_section is Section.BLOG
        assert nav.state.selected_article == 1

    def test_close_keeps_blog(self, nav):
        nav.open_article(1)
        nav.close_article()
        assert nav.state.selected_article is None
        assert nav.state.active_section is Section.BLOG

    def test_back_is_close(self, nav):
        nav.open_article(2)
        nav.back()
        assert nav.state.selected_article is None

    def test_open_unknown_article_is_noop(self, nav):
        nav.navigate_to(Section.SKILLS)
        before = dataclasses.replace(nav.state)
        assert nav.open_article(404) is False
        assert nav.state == before

    def test_open_before_content_loaded_is_noop(self):
        nav = Navigator()
        assert nav.open_article(1) is False
        assert nav.state == NavigationState()

    def test_prune_clears_vanished_selection(self, nav):
        nav.open_article(2)
        nav.prune(PortfolioContent(articles=[{"id": 1}]))
        assert nav.state.selected_article is None
        assert nav.state.active_section is Section.BLOG

    def test_prune_keeps_existing_selection(self, nav, content):
        nav.open_article(1)
        nav.prune(content)
        assert nav.state.selected_article == 1


class TestLabels:
    def test_every_section_has_a_label(self):
        assert list(SECTION_LABELS) == list(Section)

    @pytest.mark.parametrize("section", list(Section))
    def test_round_trip(self, section):
        assert section_for_label(label_for(section)) is section

    def test_unknown_label(self):
        with pytest.raises(KeyError):
            section_for_label("Gallery")
