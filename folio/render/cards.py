# folio/render/cards.py
from __future__ import annotations

from typing import Iterable, List, Sequence

from ..model import ALL_TAGS, Project
from .escape import esc, safe_url

STAGGER_MS = 50


def render_card(project: Project, *, index: int = 0) -> str:
    """Render one project card.

    The "View Details" button is always present and carries the card's
    position in the visible list; the demo link only when demo_url is usable.
    """
    title = esc(project.title)
    thumb = safe_url(project.thumbnail)
    demo = safe_url(project.demo_url)

    parts: List[str] = ['<article class="project-card">']
    if thumb:
        parts.append(
            f'<img src="{esc(thumb)}" alt="{esc(project.thumbnail_alt or "Project screenshot")}"'
            ' class="project-thumbnail" loading="lazy">'
        )
    parts.append('<div class="project-body">')
    parts.append(f'<h3 class="project-title">{title}</h3>')
    parts.append('<div class="project-tags">')
    parts.extend(f'<span class="project-tag">{esc(t)}</span>' for t in project.tags)
    parts.append("</div>")
    parts.append(f'<p class="project-description">{esc(project.description)}</p>')
    parts.append('<div class="project-actions">')
    parts.append(
        f'<button class="btn btn-primary view-details" data-index="{int(index)}"'
        f' aria-label="View details for {title}">View Details</button>'
    )
    if demo:
        parts.append(
            f'<a href="{esc(demo)}" class="btn btn-outline demo-link" target="_blank"'
            f' rel="noopener noreferrer" aria-label="Open live demo for {title}">Live Demo</a>'
        )
    parts.append("</div></div></article>")
    return "".join(parts)


def render_cards(projects: Sequence[Project], *, reduced_motion: bool = False) -> str:
    out: List[str] = []
    for i, p in enumerate(projects):
        delay = 0 if reduced_motion else i * STAGGER_MS
        out.append(
            f'<div class="project-card-wrapper" style="animation-delay: {delay}ms">'
            f"{render_card(p, index=i)}</div>"
        )
    return "".join(out)


def tag_label(tag: str) -> str:
    return "All" if tag == ALL_TAGS else tag


def render_filter_tags(tags: Iterable[str], *, active: str = ALL_TAGS) -> str:
    out: List[str] = []
    for t in tags:
        cls = "tag-btn active" if t == active else "tag-btn"
        pressed = "true" if t == active else "false"
        out.append(
            f'<button class="{cls}" data-tag="{esc(t)}" aria-pressed="{pressed}">{esc(tag_label(t))}</button>'
        )
    return "".join(out)


def render_skeleton_cards(count: int = 6) -> str:
    one = (
        '<div class="skeleton-card" aria-hidden="true">'
        '<div class="skeleton-thumbnail"></div>'
        '<div class="skeleton-body">'
        '<div class="skeleton-line title"></div>'
        '<div class="skeleton-line tags"></div>'
        '<div class="skeleton-line desc-1"></div>'
        '<div class="skeleton-line desc-2"></div>'
        '<div class="skeleton-line button"></div>'
        "</div></div>"
    )
    return one * max(0, int(count))
