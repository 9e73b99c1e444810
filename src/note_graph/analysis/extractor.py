"""Extraction of title, body text and wikilink targets from a parsed note."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from note_graph.io.markdown import WIKILINK, parse_markdown

TITLE_TAG = "h1"
# Inline code counts as a plain run for the body, never for the title.
TEXT_RUNS = ("text", "code_inline")


@dataclass(slots=True)
class ExtractedContent:
    title: str = ""
    body: str = ""
    links: List[str] = field(default_factory=list)


def _heading_text(heading: SyntaxTreeNode) -> str:
    """Concatenate the plain text runs directly inside a heading."""

    parts: list[str] = []
    for child in heading.children:
        # Heading content sits in a single inline container.
        runs = child.children if child.type == "inline" else [child]
        parts.extend(run.content for run in runs if run.type == "text")
    return "".join(parts)


def extract_content(tree: SyntaxTreeNode) -> ExtractedContent:
    """
    Walk ``tree`` once in document order and collect its content.

    * every text run (inline code included) is appended to the body, joined
      with newlines;
    * the first level-1 heading provides the title, later ones are ignored;
    * every wikilink contributes its raw target, duplicates included.
    """

    title: str | None = None
    body: list[str] = []
    links: list[str] = []

    for node in tree.walk():
        if node.type in TEXT_RUNS:
            body.append(node.content)
        elif node.type == "heading":
            if title is None and node.tag == TITLE_TAG:
                title = _heading_text(node)
        elif node.type == WIKILINK:
            links.append(node.meta.get("target", ""))

    return ExtractedContent(title=title or "", body="\n".join(body), links=links)


def extract_document(source: bytes | str, parser: MarkdownIt | None = None) -> ExtractedContent:
    """Parse a note and extract its content in one step."""

    return extract_content(parse_markdown(source, parser))


__all__ = ["ExtractedContent", "extract_content", "extract_document"]
