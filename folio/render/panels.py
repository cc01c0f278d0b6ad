# folio/render/panels.py
from __future__ import annotations

from typing import Sequence

from ..model import Project
from .escape import esc, safe_url


def render_load_error(message: str) -> str:
    return (
        '<div class="error-message" role="alert">'
        f"<p>Failed to load projects. {esc(message)}</p>"
        '<button class="btn btn-primary retry-load" id="retry-load">Try Again</button>'
        "</div>"
    )


def render_init_error(missing: Sequence[str]) -> str:
    items = "".join(f"<li>{esc(m)}</li>" for m in missing)
    return (
        '<div class="init-error" role="alert">'
        "<h1>Initialization Error</h1>"
        "<p>The following elements are missing:</p>"
        f'<ul class="missing-mounts">{items}</ul>'
        "<p>Please check the HTML structure and try again.</p>"
        "</div>"
    )


def render_modal_body(project: Project) -> str:
    """Render detail content for the modal's content region."""
    image = safe_url(project.image)
    demo = safe_url(project.demo_url)
    repo = safe_url(project.repo_url)

    parts = []
    if image:
        parts.append(
            f'<img src="{esc(image)}" alt="{esc(project.image_alt or "Project detail view")}"'
            ' class="modal-image" loading="lazy">'
        )
    parts.append(f'<h2 class="modal-title" id="modal-title">{esc(project.title)}</h2>')
    if project.tags:
        tags = "".join(f'<span class="project-tag">{esc(t)}</span>' for t in project.tags)
        parts.append(f'<div class="modal-tags">{tags}</div>')
    parts.append(f'<p class="modal-description">{esc(project.long_description)}</p>')
    parts.append('<div class="modal-actions">')
    if demo:
        parts.append(
            f'<a href="{esc(demo)}" class="btn btn-primary" target="_blank" rel="noopener noreferrer">'
            "View Live Project</a>"
        )
    if repo:
        parts.append(
            f'<a href="{esc(repo)}" class="btn btn-outline" target="_blank" rel="noopener noreferrer">'
            "View Code</a>"
        )
    parts.append("</div>")
    return "".join(parts)


def render_copy_email(email: str) -> str:
    return (
        f'<button class="btn btn-outline copy-email" data-email="{esc(email)}"'
        f' aria-label="Copy email address {esc(email)}">{esc(email)}</button>'
    )
