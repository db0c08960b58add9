"""
Site Content API — HTML Sanitization Policies
==============================================

What:  Allowlist-based HTML cleaning for admin-entered rich text, preventing
       stored cross-site scripting when the public site renders it as HTML.
How:   bleach parses the fragment, unwraps every tag not on the allowlist
       (keeping its text), drops every attribute not on the allowlist and
       removes href values whose scheme is not http, https or mailto.

Two named policies exist and are kept separate:

    RESTRICTIVE  short rich-text fields (team member name / position)
                 tags:  strong b em i br p ul ol li span a
                 attrs: href

    CONTENT      long-form CMS body content
                 tags:  p br strong b em i u s sub sup a ul ol li span div
                        h1-h6 blockquote hr
                 attrs: href target rel class

`strip_tags()` is the plain-text companion for alt text, titles and
aria-labels. When stripping leaves nothing but whitespace it returns the
input unmodified; callers rely on getting *something* back for labels.
"""

import html
import logging
import re
from dataclasses import dataclass
from typing import Any, FrozenSet

import bleach

logger = logging.getLogger(__name__)

SAFE_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https", "mailto"})

# Elements whose text is code, not content. Their bodies are removed before
# the allowlist pass; bleach alone would keep the script source as text.
# Neither the opener nor the body may run past the next opener of the same
# element, so an unclosed tag ends its match attempt there.
_EXECUTABLE_BLOCK_RE = re.compile(
    r"<(script|style)\b[^<>]*>(?:(?!<\1\b).)*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class SanitizationPolicy:
    """An allowlist of tags and attributes, applied with bleach."""

    name: str
    tags: FrozenSet[str]
    attributes: FrozenSet[str]
    protocols: FrozenSet[str] = SAFE_PROTOCOLS

    def clean(self, value: Any) -> str:
        """
        Return `value` reduced to this policy's allowlist.

        Never raises. None and non-string input yield "".
        """
        if value is None or not isinstance(value, str):
            return ""
        if not value:
            return ""

        without_blocks = _EXECUTABLE_BLOCK_RE.sub("", value)
        try:
            return bleach.clean(
                without_blocks,
                tags=self.tags,
                attributes=sorted(self.attributes),
                protocols=self.protocols,
                strip=True,
                strip_comments=True,
            )
        except Exception:
            # parser failure: fall back to escaping everything
            logger.warning("Sanitizer '%s' failed; escaping input", self.name, exc_info=True)
            return html.escape(without_blocks)


RESTRICTIVE = SanitizationPolicy(
    name="restrictive",
    tags=frozenset({"strong", "b", "em", "i", "br", "p", "ul", "ol", "li", "span", "a"}),
    attributes=frozenset({"href"}),
)

CONTENT = SanitizationPolicy(
    name="content",
    tags=frozenset({
        "p", "br", "strong", "b", "em", "i", "u", "s", "sub", "sup",
        "a", "ul", "ol", "li", "span", "div",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "blockquote", "hr",
    }),
    attributes=frozenset({"href", "target", "rel", "class"}),
)


def sanitize(value: Any, policy: SanitizationPolicy = RESTRICTIVE) -> str:
    """Clean `value` with the given policy (restrictive by default)."""
    return policy.clean(value)


def sanitize_restrictive(value: Any) -> str:
    """Team member name/position and similar short rich text."""
    return RESTRICTIVE.clean(value)


def sanitize_content(value: Any) -> str:
    """Long-form CMS content rendered as HTML on the public site."""
    return CONTENT.clean(value)


def strip_tags(value: Any) -> str:
    """
    Remove all markup, for use where plain text is required.

    If nothing but whitespace is left after stripping, the original input is
    returned unmodified.
    """
    if value is None or not isinstance(value, str):
        return ""
    stripped = _TAG_RE.sub("", value).strip()
    return stripped or value
