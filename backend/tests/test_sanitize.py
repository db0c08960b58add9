"""
Site Content API — Sanitization Policy Tests
=============================================

What we test:
    ✅ Allowed markup survives, disallowed tags are unwrapped
    ✅ script/style bodies disappear entirely
    ✅ Event-handler attributes and javascript: hrefs are removed
    ✅ The content policy allows more than the restrictive one
    ✅ Non-string input never raises
    ✅ strip_tags returns the original when nothing is left
    ✅ No script tag or onerror handler survives either policy
    ✅ Many unclosed script/style openers are cleaned in linear time
"""

import time

import pytest

from content_api.security import (
    CONTENT,
    RESTRICTIVE,
    sanitize,
    sanitize_content,
    sanitize_restrictive,
    strip_tags,
)


class TestRestrictivePolicy:
    def test_keeps_allowed_inline_markup(self):
        assert sanitize_restrictive("<strong>Lead</strong> <em>Engineer</em>") == (
            "<strong>Lead</strong> <em>Engineer</em>"
        )

    def test_unwraps_disallowed_tags_keeping_text(self):
        assert sanitize_restrictive("<h1>Jane</h1>") == "Jane"
        assert sanitize_restrictive("<div><b>CTO</b></div>") == "<b>CTO</b>"

    def test_drops_script_body(self):
        result = sanitize_restrictive('Jane<script>alert("x")</script> Doe')
        assert "script" not in result
        assert "alert" not in result
        assert result == "Jane Doe"

    def test_drops_style_body(self):
        assert sanitize_restrictive("<style>body{display:none}</style>CEO") == "CEO"

    def test_removes_event_handler_attributes(self):
        result = sanitize_restrictive('<p onclick="steal()">Designer</p>')
        assert result == "<p>Designer</p>"

    def test_removes_javascript_href_but_keeps_anchor_text(self):
        result = sanitize_restrictive('<a href="javascript:alert(1)">profile</a>')
        assert "javascript" not in result
        assert "profile" in result

    @pytest.mark.parametrize("href", [
        "https://example.com/jane",
        "http://example.com",
        "mailto:jane@example.com",
    ])
    def test_keeps_safe_hrefs(self, href):
        assert f'href="{href}"' in sanitize_restrictive(f'<a href="{href}">link</a>')

    def test_restrictive_drops_class_attribute(self):
        assert sanitize_restrictive('<span class="x">A</span>') == "<span>A</span>"

    def test_img_is_removed(self):
        result = sanitize_restrictive('<img src="x" onerror="alert(1)">Name')
        assert "<img" not in result
        assert "onerror" not in result


class TestContentPolicy:
    def test_allows_headings_and_class(self):
        html = '<h2 class="title">About</h2><blockquote>Quote</blockquote>'
        assert sanitize_content(html) == html

    def test_still_blocks_scripts(self):
        assert sanitize_content("<p>Hi</p><script>evil()</script>") == "<p>Hi</p>"

    def test_policies_are_distinct(self):
        assert "h1" in CONTENT.tags
        assert "h1" not in RESTRICTIVE.tags
        assert RESTRICTIVE.attributes == frozenset({"href"})


class TestNonStringInput:
    @pytest.mark.parametrize("value", [None, 42, 3.5, ["<b>x</b>"], {"a": 1}, ""])
    def test_returns_empty_string(self, value):
        assert sanitize(value) == ""
        assert sanitize(value, CONTENT) == ""

    def test_plain_text_passes_through(self):
        assert sanitize_restrictive("Jane Doe") == "Jane Doe"


class TestStripTags:
    def test_removes_all_tags(self):
        assert strip_tags("<b>Team</b> <i>photo</i>") == "Team photo"

    def test_trims_whitespace(self):
        assert strip_tags("  <span> Logo </span>  ") == "Logo"

    def test_returns_original_when_only_markup(self):
        value = "<br/><img src='a.png'>"
        assert strip_tags(value) == value

    def test_returns_original_for_whitespace_only(self):
        assert strip_tags("   ") == "   "

    @pytest.mark.parametrize("value", [None, 7, object()])
    def test_non_string_is_empty(self, value):
        assert strip_tags(value) == ""


class TestProperties:
    @pytest.mark.parametrize("value", [
        "<script>alert(1)</script>",
        "<SCRIPT src='//evil'></SCRIPT>Name",
        '<img src=x onerror="alert(1)">',
        '<p onerror="x()">text</p>',
        '<span><script>a()</script><b onerror=y>bold</b></span>',
        "<scr<script>ipt>alert(1)</script>",
    ])
    @pytest.mark.parametrize("policy", [RESTRICTIVE, CONTENT])
    def test_output_never_contains_script_or_onerror(self, value, policy):
        result = sanitize(value, policy).lower()
        assert "<script" not in result
        assert "onerror=" not in result

    @pytest.mark.parametrize("value", [
        "<b>Team</b> photo",
        "plain",
        "<p>a</p><p>b</p>",
        "  <i>x</i>  ",
    ])
    def test_strip_tags_idempotent_for_text(self, value):
        once = strip_tags(value)
        assert strip_tags(once) == once

    def test_strip_tags_pure_markup_branch(self):
        value = "<hr><br>"
        once = strip_tags(value)
        assert once == value
        assert strip_tags(once) == value


class TestUnclosedOpeners:
    @pytest.mark.parametrize("opener", ["<script>", "<style>", "<SCRIPT type='x'>a"])
    def test_large_input_is_cleaned_quickly(self, opener):
        value = opener * 10000

        start = time.perf_counter()
        result = sanitize_restrictive(value)
        elapsed = time.perf_counter() - start

        assert elapsed < 2.0
        assert "<script" not in result.lower()
        assert "<style" not in result.lower()

    def test_closed_block_after_unclosed_opener_is_removed(self):
        result = sanitize_restrictive("<script>x<script>evil()</script>Name")
        assert "evil" not in result
        assert result.endswith("Name")
