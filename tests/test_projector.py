"""Tests for ``portfolio.projector`` — mapping content + navigation to views."""

from __future__ import annotations

import dataclasses

import pytest

from portfolio.errors import FragmentUnavailable, LoadFailed
from portfolio.loader import ContentSnapshot, ContentStatus
from portfolio.navigation import NavigationState, Section
from portfolio.projector import (
    ArticleDetailView, ArticleListView, ContactView, ViewKind, initials, project,
)

HOME_KINDS = (ViewKind.HERO, ViewKind.ABOUT, ViewKind.SKILLS, ViewKind.PROJECTS)


class TestPlaceholders:
    @pytest.mark.parametrize("section", list(Section))
    def test_loading_regardless_of_nav(self, section):
        view = project(None, NavigationState(active_section=section, menu_open=True))
        assert view.kinds == (ViewKind.LOADING,)
        assert view.is_placeholder

    def test_loading_snapshot(self):
        view = project(ContentSnapshot(ContentStatus.LOADING), NavigationState())
        assert view.kinds == (ViewKind.LOADING,)

    def test_failed_snapshot(self):
        error = LoadFailed(FragmentUnavailable("skills"))
        snap = ContentSnapshot(ContentStatus.FAILED, None, error)
        view = project(snap, NavigationState(active_section=Section.BLOG))
        assert view.kinds == (ViewKind.UNAVAILABLE,)
        assert view.section is None

    def test_ready_snapshot_projects_content(self, content):
        view = project(ContentSnapshot(ContentStatus.READY, content), NavigationState())
        assert view.kinds == HOME_KINDS


class TestSections:
    def test_home_composite_in_fixed_order(self, content):
        view = project(content, NavigationState())
        assert view.section is Section.HOME
        assert view.kinds == HOME_KINDS
        hero, about, skills, projects = view.views
        assert hero.name == "Jana Novak"
        assert [target for _, target in hero.actions] == [Section.PROJECTS, Section.CONTACT]
        assert about.about.text == "About me."
        assert skills.skills == content.skills
        assert projects.projects == content.projects

    @pytest.mark.parametrize("section,kind", [
        (Section.SKILLS, ViewKind.SKILLS),
        (Section.PROJECTS, ViewKind.PROJECTS),
        (Section.BLOG, ViewKind.ARTICLE_LIST),
        (Section.ABOUT, ViewKind.ABOUT),
        (Section.CONTACT, ViewKind.CONTACT),
    ])
    def test_single_section(self, content, section, kind):
        view = project(content, NavigationState(active_section=section))
        assert view.kinds == (kind,)
        assert view.section is section

    def test_about_fed_name_and_text(self, content):
        (about,) = project(content, NavigationState(active_section=Section.ABOUT)).views
        assert about.name == content.name
        assert about.about == content.about

    def test_contact_fed_contact(self, content):
        (view,) = project(content, NavigationState(active_section=Section.CONTACT)).views
        assert isinstance(view, ContactView)
        assert view.contact.phone == "+420 777 000 111"

    def test_unknown_section_falls_back_to_home(self, content):
        view = project(content, NavigationState(active_section="gallery"))
        assert view.section is Section.HOME
        assert view.kinds == HOME_KINDS

    def test_project_without_link(self, content):
        (view,) = project(content, NavigationState(active_section=Section.PROJECTS)).views
        library = view.projects[1]
        assert library.link is None
        assert library.image is None


class TestBlog:
    def test_selected_article_shows_detail(self, content):
        nav = NavigationState(active_section=Section.BLOG, selected_article=1)
        (view,) = project(content, nav).views
        assert isinstance(view, ArticleDetailView)
        assert view.article.title == "First"
        assert view.body_html == "<p>Hello</p>"

    def test_selection_hidden_outside_blog(self, content):
        nav = NavigationState(active_section=Section.SKILLS, selected_article=1)
        assert project(content, nav).kinds == (ViewKind.SKILLS,)

    def test_stale_selection_lists_articles(self, content):
        nav = NavigationState(active_section=Section.BLOG, selected_article=99)
        (view,) = project(content, nav).views
        assert isinstance(view, ArticleListView)
        assert view.articles == content.articles

    def test_body_sanitised_by_default(self, content):
        nav = NavigationState(active_section=Section.BLOG, selected_article=2)
        (view,) = project(content, nav, trust_markup=False).views
        assert "<script" not in view.body_html
        assert "<p>World</p>" in view.body_html

    def test_trusted_body_passes_through(self, content):
        nav = NavigationState(active_section=Section.BLOG, selected_article=2)
        (view,) = project(content, nav, trust_markup=True).views
        assert view.body_html == content.articles[1].content


class TestChrome:
    def test_active_nav_item(self, content):
        chrome = project(content, NavigationState(active_section=Section.BLOG)).chrome
        active = [item.section for item in chrome.nav if item.active]
        assert active == [Section.BLOG]
        assert [item.section for item in chrome.nav] == list(Section)

    def test_brand_and_footer(self, content):
        chrome = project(content, NavigationState(menu_open=True), compact_nav=True).chrome
        assert chrome.brand == "Jana Novak"
        assert chrome.initials == "JN"
        assert chrome.menu_open is True
        assert chrome.show_menu_toggle is True
        assert chrome.footer.email == "jana@example.com"
        assert len(chrome.footer.links) == len(Section)

    @pytest.mark.parametrize("name,expected", [("", ""), ("cher", "C"), ("Ada King Lovelace", "AK")])
    def test_initials(self, name, expected):
        assert initials(name) == expected


class TestPurity:
    def test_inputs_untouched_and_output_stable(self, content):
        nav = NavigationState(active_section=Section.BLOG, menu_open=True, selected_article=2)
        before = dataclasses.replace(nav)
        first = project(content, nav)
        second = project(content, nav)
        assert nav == before
        assert first == second
