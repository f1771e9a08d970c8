"""Tests for resolution plans."""

import pytest
from staticroute.core.paths import RequestPath
from staticroute.core.resolution import MAX_ATTEMPTS, ResolutionPlan, build_plan
from staticroute.core.types import Mode


def _plan(mode: Mode, raw: str) -> ResolutionPlan:
    return build_plan(mode, RequestPath.parse(raw))


class TestNormalMode:
    """Tests for normal mode."""

    @pytest.mark.parametrize("raw", ["/", "/about/", "/about/index.html", "/app.js"])
    def test__any_path__candidate_is_path(self, raw: str) -> None:
        plan = _plan(Mode.NORMAL, raw)

        assert plan.candidate == RequestPath.parse(raw)
        assert plan.redirect is None
        assert plan.fallback is None


class TestPrettyUrlMode:
    """Tests for pretty URL mode."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/", "/index.html"),
            ("/about", "/about/index.html"),
            ("/about/", "/about/index.html"),
            ("/docs/guide/", "/docs/guide/index.html"),
        ],
    )
    def test__directory__candidate_is_index(self, raw: str, expected: str) -> None:
        plan = _plan(Mode.PRETTY_URL, raw)

        assert str(plan.candidate) == expected
        assert plan.redirect is None
        assert plan.fallback is None

    def test__nested_index__redirects_to_parent(self) -> None:
        plan = _plan(Mode.PRETTY_URL, "/about/index.html")

        assert str(plan.candidate) == "/about/index.html"
        assert plan.redirect is not None
        assert str(plan.redirect) == "/about/"
        assert plan.fallback is None

    def test__root_index__redirects_to_root(self) -> None:
        plan = _plan(Mode.PRETTY_URL, "/index.html")

        assert str(plan.candidate) == "/index.html"
        assert plan.redirect == RequestPath.root()

    def test__other_file__candidate_is_path(self) -> None:
        plan = _plan(Mode.PRETTY_URL, "/assets/style.css")

        assert str(plan.candidate) == "/assets/style.css"
        assert plan.redirect is None
        assert plan.fallback is None


class TestSinglePageAppMode:
    """Tests for single-page app mode."""

    @pytest.mark.parametrize("raw", ["/", "/dashboard", "/dashboard/settings/"])
    def test__directory__candidate_is_root_index(self, raw: str) -> None:
        plan = _plan(Mode.SINGLE_PAGE_APP, raw)

        assert str(plan.candidate) == "/index.html"
        assert plan.redirect is None
        assert plan.fallback is None

    def test__root_index__redirects_to_root(self) -> None:
        plan = _plan(Mode.SINGLE_PAGE_APP, "/index.html")

        assert str(plan.candidate) == "/index.html"
        assert plan.redirect == RequestPath.root()
        assert plan.fallback is None

    def test__file__falls_back_to_root_index(self) -> None:
        plan = _plan(Mode.SINGLE_PAGE_APP, "/app.js")

        assert str(plan.candidate) == "/app.js"
        assert plan.redirect is None
        assert plan.fallback is not None
        assert str(plan.fallback.candidate) == "/index.html"
        assert plan.fallback.redirect is None
        assert plan.fallback.fallback is None

    def test__nested_index__is_served_with_fallback(self) -> None:
        """index.html below root is treated like any other file."""
        plan = _plan(Mode.SINGLE_PAGE_APP, "/blog/index.html")

        assert str(plan.candidate) == "/blog/index.html"
        assert plan.redirect is None
        assert plan.fallback is not None
        assert str(plan.fallback.candidate) == "/index.html"


class TestAttempts:
    """Tests for ResolutionPlan.attempts()."""

    @pytest.mark.parametrize("mode", list(Mode))
    @pytest.mark.parametrize(
        "raw",
        ["/", "/index.html", "/a/index.html", "/a/b/c.js", "/deep/link", "/../x.txt"],
    )
    def test__every_plan__has_at_most_two_attempts(self, mode: Mode, raw: str) -> None:
        attempts = list(_plan(mode, raw).attempts())

        assert 1 <= len(attempts) <= MAX_ATTEMPTS

    def test__fallback_plan__yields_primary_then_fallback(self) -> None:
        plan = _plan(Mode.SINGLE_PAGE_APP, "/missing.png")

        candidates = [str(step.candidate) for step in plan.attempts()]

        assert candidates == ["/missing.png", "/index.html"]


class TestModeParse:
    """Tests for Mode.parse()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("normal", Mode.NORMAL),
            ("pretty_url", Mode.PRETTY_URL),
            ("pretty-url", Mode.PRETTY_URL),
            ("SPA", Mode.SINGLE_PAGE_APP),
            ("single-page-app", Mode.SINGLE_PAGE_APP),
        ],
    )
    def test__known_names__parse(self, value: str, expected: Mode) -> None:
        assert Mode.parse(value) is expected

    def test__unknown_name__raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown mode 'fancy'"):
            Mode.parse("fancy")
