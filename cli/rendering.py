"""Utilities for rendering resolved links in the CLI."""

from __future__ import annotations

from typing import List

from streamscout.branding import normalize_branding
from streamscout.scraper.models import Link, PipelineResult
from streamscout.titles import language_badge, split_title, truncate_subtitle


def _link_line(index: int, link: Link) -> str:
    marker = "★" if link.is_trusted else "·"
    return f"  {index:>2}. {marker} {link.label}  →  {link.url}"


def render_result(result: PipelineResult) -> str:
    """Render a :class:`PipelineResult` as plain text.

    Trusted links come first exactly as ranked; the order is never changed
    here, only grouped under headings.
    """
    lines: List[str] = []

    title = normalize_branding(result.page_title)
    if title:
        head, subtitle = split_title(title)
        lines.append(f"Title  : {head}")
        if subtitle:
            lines.append(f"         {truncate_subtitle(subtitle)}")
        badge = language_badge(title)
        if badge:
            lines.append(f"Audio  : {badge}")
    else:
        lines.append("Title  : (none)")

    if result.is_zip_file:
        lines.append("Zip    : yes (download only)")

    trusted = [link for link in result.links if link.is_trusted]
    others = [link for link in result.links if not link.is_trusted]

    index = 1
    if trusted:
        lines.append("")
        lines.append("Trusted servers:")
        for link in trusted:
            lines.append(_link_line(index, link))
            index += 1
    if others:
        lines.append("")
        lines.append("Other servers:")
        for link in others:
            lines.append(_link_line(index, link))
            index += 1

    return "\n".join(lines)
