"""Tests for the platform registry."""

import re

from curator.models import CostTier
from curator.verification.platforms import (
    PlatformInfo,
    PlatformRegistry,
    get_platform_registry,
    platform_info,
)


class TestRegistryMatch:
    def test_course_page_matches(self):
        platform = get_platform_registry().match("https://www.udemy.com/course/the-complete-javascript-course/")
        assert platform is not None
        assert platform.display_name == "Udemy"
        assert platform.cost_tier == CostTier.paid
        assert platform.base_rating == 4.3

    def test_bare_root_is_not_a_match(self):
        registry = get_platform_registry()
        assert registry.lookup("https://www.udemy.com/") is not None
        assert registry.match("https://www.udemy.com/") is None

    def test_plain_http_is_not_a_match(self):
        assert get_platform_registry().match("http://www.udemy.com/course/x/") is None

    def test_lookalike_domain_rejected(self):
        registry = get_platform_registry()
        assert registry.lookup("https://notudemy.com/course/x/") is None
        assert registry.lookup("https://udemy.com.evil.example/course/x/") is None

    def test_host_case_ignored(self):
        assert get_platform_registry().match("https://WWW.UDEMY.COM/course/x/") is not None

    def test_short_youtube_links(self):
        platform = get_platform_registry().match("https://youtu.be/PkZNo7MFNFg")
        assert platform is not None
        assert platform.display_name == "YouTube"

    def test_mdn_docs_only(self):
        registry = get_platform_registry()
        assert registry.match("https://developer.mozilla.org/en-US/docs/Web/JavaScript") is not None
        assert registry.match("https://developer.mozilla.org/en-US/") is None

    def test_unknown_host(self):
        assert get_platform_registry().lookup("https://nodejs.org/en/learn") is None

    def test_garbage_input(self):
        registry = get_platform_registry()
        assert registry.lookup("") is None
        assert registry.match("not a url") is None
        assert registry.lookup("http://[::1") is None


class TestRegistryShape:
    def test_contents(self):
        registry = get_platform_registry()
        assert len(registry) == 18
        assert registry.domains() == sorted(registry.domains())
        assert "coursera.org" in registry.domains()

    def test_singleton(self):
        assert get_platform_registry() is get_platform_registry()

    def test_platform_info_ignores_shape(self):
        info = platform_info("https://www.coursera.org/")
        assert info is not None
        assert info.display_name == "Coursera"

    def test_longest_domain_wins(self):
        generic = PlatformInfo("google.com", "Google", CostTier.free, 4.0, re.compile(r"^https://"))
        specific = PlatformInfo("developers.google.com", "Google Developers", CostTier.free, 4.8,
                                re.compile(r"^https://developers\.google\.com/"))
        registry = PlatformRegistry([generic, specific])

        assert registry.lookup("https://developers.google.com/learn").display_name == "Google Developers"
        assert registry.lookup("https://www.google.com/search").display_name == "Google"
