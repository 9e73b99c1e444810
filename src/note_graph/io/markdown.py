"""Markdown parsing with ``[[wikilink]]`` support on top of markdown-it-py."""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from markdown_it.tree import SyntaxTreeNode

WIKILINK = "wikilink"


def _split_reference(inner: str) -> tuple[str, str, str]:
    """Split ``target#fragment|label`` into its three parts."""

    reference, _, label = inner.partition("|")
    target, _, fragment = reference.partition("#")
    return target, fragment, label or reference


def _wikilink_rule(state: StateInline, silent: bool) -> bool:
    start = state.pos
    embed = state.src.startswith("!", start)
    opener = start + 1 if embed else start
    if not state.src.startswith("[[", opener):
        return False

    close = state.src.find("]]", opener + 2, state.posMax)
    if close == -1:
        return False

    inner = state.src[opener + 2 : close]
    if not inner or "[" in inner or "\n" in inner:
        return False

    if not silent:
        target, fragment, label = _split_reference(inner)

        token = state.push(f"{WIKILINK}_open", "a", 1)
        token.attrSet("href", target)
        token.markup = "![[" if embed else "[["
        token.meta = {"target": target, "fragment": fragment, "embed": embed}

        text = state.push("text", "", 0)
        text.content = label

        token = state.push(f"{WIKILINK}_close", "a", -1)
        token.markup = "]]"

    state.pos = close + 2
    return True


def wikilink_plugin(md: MarkdownIt) -> None:
    """Register the wikilink inline rule ahead of standard links and images."""

    md.inline.ruler.before("link", WIKILINK, _wikilink_rule)


def create_parser() -> MarkdownIt:
    """CommonMark parser extended with wikilinks."""

    return MarkdownIt("commonmark").use(wikilink_plugin)


def parse_markdown(source: bytes | str, parser: MarkdownIt | None = None) -> SyntaxTreeNode:
    """
    Parse ``source`` into a traversable syntax tree.

    Raw bytes are decoded as UTF-8; a ``UnicodeDecodeError`` is left to the
    caller, which treats it as a parse failure for that note.
    """

    if isinstance(source, bytes):
        source = source.decode("utf-8")
    parser = parser or create_parser()
    return SyntaxTreeNode(parser.parse(source))


__all__ = ["WIKILINK", "create_parser", "parse_markdown", "wikilink_plugin"]
