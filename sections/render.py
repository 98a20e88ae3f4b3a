# sections/render.py — Streamlit renderers, one per view kind
# ----------------------------------------------------------
# Each renderer gets its slice of the ViewDescriptor plus the Navigator,
# which it only uses to fire transitions (never to read state).

from __future__ import annotations
from html import escape
from typing import Callable, Dict

import streamlit as st

from portfolio import config
from portfolio.navigation import Navigator
from portfolio.projector import (
    AboutView, ArticleDetailView, ArticleListView, Chrome, ContactView, HeroView,
    Placeholder, ProjectsView, SectionView, SkillsView, ViewKind,
)
from sections.charts import radar_chart


# -----------------------------
# Helpers (rerun, placeholders)
# -----------------------------
def rerun():
    try:
        st.rerun()
    except AttributeError:
        st.experimental_rerun()


def placeholder_image(seed) -> str:
    return f"https://picsum.photos/seed/{seed}/600/400"


def article_key(index: int, article_id) -> str:
    # ids 1 and "1" are distinct articles; the key has to keep them apart
    return f"article_{index}_{article_id!r}"


def go(nav: Navigator, section):
    nav.navigate_to(section); rerun()


# -----------------------------
# Chrome
# -----------------------------
def render_sidebar(chrome: Chrome, nav: Navigator):
    st.sidebar.markdown(f"<div class='brand'><span class='initials'>{escape(chrome.initials)}</span>{escape(chrome.brand)}</div>", unsafe_allow_html=True)
    st.sidebar.title("Navigate")
    for item in chrome.nav:
        label = f"▸ {item.label}" if item.active else item.label
        if st.sidebar.button(label, key=f"nav_{item.section.value}", use_container_width=True):
            go(nav, item.section)


def render_compact_menu(chrome: Chrome, nav: Navigator):
    if not chrome.show_menu_toggle:
        return
    if st.button("✕ Close menu" if chrome.menu_open else "☰ Menu", key="menu_toggle"):
        nav.toggle_menu(); rerun()
    if chrome.menu_open:
        for item in chrome.nav:
            if st.button(item.label, key=f"menu_{item.section.value}", use_container_width=True, disabled=item.active):
                go(nav, item.section)


def render_footer(chrome: Chrome, nav: Navigator):
    footer = chrome.footer
    st.markdown("---")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown(f"**{escape(footer.name)}**")
        if footer.tagline: st.caption(footer.tagline)
    with c2:
        st.markdown("**Quick links**")
        for item in footer.links:
            if st.button(item.label, key=f"foot_{item.section.value}"):
                go(nav, item.section)
    with c3:
        st.markdown("**Contact**")
        for line in (footer.email, footer.phone, footer.address):
            if line: st.write(line)
    st.caption(f"© {footer.name}. All rights reserved.")


# -----------------------------
# Section views
# -----------------------------
def render_placeholder(view: Placeholder, nav: Navigator):
    if view.kind is ViewKind.UNAVAILABLE:
        st.error(view.message)
    else:
        st.info(view.message)


def render_hero(view: HeroView, nav: Navigator):
    st.markdown(f'<div class="hero">{escape(view.name)}</div>', unsafe_allow_html=True)
    if view.tagline:
        st.markdown(f'<div class="hero-sub">{escape(view.tagline)}</div>', unsafe_allow_html=True)
    if view.bio:
        st.write(view.bio)
    cols = st.columns(max(len(view.actions), 1))
    for col, (label, target) in zip(cols, view.actions):
        with col:
            if st.button(label, key=f"hero_{target.value}", use_container_width=True):
                go(nav, target)
    st.markdown("---")


def render_about(view: AboutView, nav: Navigator):
    st.markdown('<div class="section-title">About</div>', unsafe_allow_html=True)
    if view.about.text:
        safe = escape(view.about.text).replace("\n", "<br/>")
        st.markdown(f"<div class='blurb'>{safe}</div>", unsafe_allow_html=True)
    else:
        st.caption(f"{view.name} has not written an introduction yet.")
    st.markdown("---")


def render_skills(view: SkillsView, nav: Navigator):
    st.markdown('<div class="section-title">Skills</div>', unsafe_allow_html=True)
    if not view.skills:
        st.caption("No skills listed."); return
    if config.SHOW_SKILL_RADAR and len(view.skills) >= config.MIN_RADAR_SKILLS:
        c1, c2 = st.columns([1, 1])
        with c1: radar_chart("Skill Radar", view.skills)
        target = c2
    else:
        target = st.container()
    with target:
        for skill in view.skills:
            st.progress(skill.level, text=f"{skill.name} · {skill.level}%")
    st.markdown("---")


def render_projects(view: ProjectsView, nav: Navigator):
    st.markdown('<div class="section-title">Projects</div>', unsafe_allow_html=True)
    if not view.projects:
        st.caption("No projects yet."); return
    st.markdown('<div class="portfolio-grid">', unsafe_allow_html=True)
    cols = st.columns(3)
    for i, p in enumerate(view.projects):
        with cols[i % 3]:
            st.markdown('<div class="portfolio-card">', unsafe_allow_html=True)
            st.image(p.image or placeholder_image(p.id), use_container_width=True)
            st.markdown(f'<div class="portfolio-title">{escape(p.title)}</div>', unsafe_allow_html=True)
            if p.description: st.caption(p.description)
            if p.technologies:
                st.markdown("".join(f"<span class='badge'>{escape(t)}</span>" for t in p.technologies), unsafe_allow_html=True)
            if p.link:
                st.link_button("View project", p.link, use_container_width=True)
            st.markdown('</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def render_article_list(view: ArticleListView, nav: Navigator):
    st.markdown('<div class="section-title">Blog</div>', unsafe_allow_html=True)
    if not view.articles:
        st.caption("No articles yet."); return
    cols = st.columns(3)
    for i, a in enumerate(view.articles):
        with cols[i % 3]:
            st.subheader(a.title)
            st.caption(" • ".join(x for x in (a.date, a.read_time) if x))
            if a.excerpt: st.write(a.excerpt)
            if st.button("Read more →", key=article_key(i, a.id)):
                nav.open_article(a.id); rerun()


def render_article_detail(view: ArticleDetailView, nav: Navigator):
    if st.button("← Back to blog", key="article_back"):
        nav.back(); rerun()
    a = view.article
    st.title(a.title)
    st.caption(" • ".join(x for x in (a.date, a.read_time) if x))
    st.markdown(f"<div class='article-body'>{view.body_html}</div>", unsafe_allow_html=True)


def render_contact(view: ContactView, nav: Navigator):
    c = view.contact
    st.markdown('<div class="section-title">Contact</div>', unsafe_allow_html=True)
    cL, cR = st.columns([1, 1])
    with cL:
        if c.email: st.write(f"**Email:** [{c.email}](mailto:{c.email})")
        if c.phone: st.write(f"**Phone:** {c.phone}")
        if c.address: st.write(f"**Address:** {c.address}")
    with cR:
        if c.github: st.write(f"**GitHub:** [{c.github}]({c.github})")
        if c.linkedin: st.write(f"**LinkedIn:** [{c.linkedin}]({c.linkedin})")
        if c.email:
            st.link_button("Send an email", f"mailto:{c.email}", use_container_width=True)


RENDERERS: Dict[ViewKind, Callable[[SectionView, Navigator], None]] = {
    ViewKind.LOADING: render_placeholder,
    ViewKind.UNAVAILABLE: render_placeholder,
    ViewKind.HERO: render_hero,
    ViewKind.ABOUT: render_about,
    ViewKind.SKILLS: render_skills,
    ViewKind.PROJECTS: render_projects,
    ViewKind.ARTICLE_LIST: render_article_list,
    ViewKind.ARTICLE_DETAIL: render_article_detail,
    ViewKind.CONTACT: render_contact,
}


def render_view(view: SectionView, nav: Navigator):
    RENDERERS[view.kind](view, nav)
