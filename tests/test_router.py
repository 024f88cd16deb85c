"""Tests for wren.routing.router — fragment routing and match precedence."""

import pytest

from wren.errors import ConfigurationError, NotFound
from wren.routing.query import QueryParams
from wren.routing.route import PathSegment, Route
from wren.routing.router import Router, parse_pattern


def _home(params: dict[str, str], query: QueryParams) -> str:
    return "home"


def _tags(params: dict[str, str], query: QueryParams) -> str:
    return "tags"


def _tag(params: dict[str, str], query: QueryParams) -> str:
    return f"tag:{params['name']}"


def _post(params: dict[str, str], query: QueryParams) -> str:
    return f"post:{params['id']}"


@pytest.fixture
def router() -> Router:
    r = Router()
    r.register("/", _home, name="home")
    r.register("/tags", _tags, name="tags")
    r.register("/tag/:name", _tag, name="tag")
    r.register("/post/:id", _post, name="post")
    return r


class TestParsePattern:
    def test_root(self) -> None:
        assert parse_pattern("/") == (PathSegment(""), PathSegment(""))

    def test_static(self) -> None:
        segments = parse_pattern("/tags")
        assert [s.value for s in segments] == ["", "tags"]
        assert not any(s.is_param for s in segments)

    def test_param(self) -> None:
        segments = parse_pattern("/tag/:name")
        assert segments[2].is_param is True
        assert segments[2].param_name == "name"

    def test_trailing_slash_is_distinct(self) -> None:
        assert len(parse_pattern("/tags/")) == 3
        assert len(parse_pattern("/tags")) == 2

    def test_rejects_unnamed_param(self) -> None:
        with pytest.raises(ConfigurationError, match="without a name"):
            parse_pattern("/tag/:")

    def test_rejects_duplicate_param(self) -> None:
        with pytest.raises(ConfigurationError, match="more than once"):
            parse_pattern("/pair/:a/:a")


class TestRoute:
    def test_is_static(self) -> None:
        route = Route(pattern="/tags", handler=_tags, segments=parse_pattern("/tags"))
        assert route.is_static is True

    def test_param_names(self) -> None:
        route = Route(
            pattern="/a/:x/b/:y",
            handler=_tags,
            segments=parse_pattern("/a/:x/b/:y"),
        )
        assert route.is_static is False
        assert route.param_names == ("x", "y")


class TestRouterMatch:
    def test_root(self, router: Router) -> None:
        match = router.resolve("/")
        assert match.route.name == "home"
        assert match.params == {}

    def test_empty_path_is_root(self, router: Router) -> None:
        assert router.resolve("").route.name == "home"

    def test_static(self, router: Router) -> None:
        assert router.resolve("/tags").handler is _tags

    def test_param_binding(self, router: Router) -> None:
        match = router.resolve("/tag/python")
        assert match.params == {"name": "python"}
        assert match.handler is _tag

    def test_param_is_percent_decoded(self, router: Router) -> None:
        assert router.resolve("/tag/C%2B%2B").params == {"name": "C++"}

    def test_param_decodes_utf8(self, router: Router) -> None:
        assert router.resolve("/tag/%E5%89%8D%E7%AB%AF").params == {"name": "前端"}

    def test_malformed_encoding_does_not_match(self, router: Router) -> None:
        assert router.match("/tag/%FF") is None

    def test_segment_count_mismatch(self, router: Router) -> None:
        with pytest.raises(NotFound):
            router.resolve("/tag/a/b")

    def test_trailing_slash_does_not_match(self, router: Router) -> None:
        assert router.match("/tags/") is None

    def test_unknown_path(self, router: Router) -> None:
        with pytest.raises(NotFound) as exc_info:
            router.resolve("/nope")
        assert exc_info.value.path == "/nope"

    def test_empty_param_segment_binds_empty_string(self, router: Router) -> None:
        assert router.resolve("/tag/").params == {"name": ""}

    def test_query_is_attached(self, router: Router) -> None:
        query = QueryParams("q=go")
        match = router.resolve("/tags", query)
        assert match.query is query

    def test_default_query_is_empty(self, router: Router) -> None:
        assert len(router.resolve("/tags").query) == 0


class TestPrecedence:
    def test_static_beats_param_registered_first(self) -> None:
        r = Router()
        r.register("/post/:id", _post)
        r.register("/post/latest", _home)

        assert r.resolve("/post/latest").handler is _home
        assert r.resolve("/post/other").handler is _post

    def test_first_param_pattern_wins(self) -> None:
        r = Router()
        r.register("/x/:a", _tag)
        r.register("/x/:b", _post)

        match = r.resolve("/x/1")
        assert match.handler is _tag
        assert match.params == {"a": "1"}

    def test_static_segments_must_agree(self) -> None:
        r = Router()
        r.register("/a/:x/c", _tag)
        r.register("/a/:x/d", _post)

        assert r.resolve("/a/1/d").handler is _post


class TestRegistration:
    def test_len_and_order(self, router: Router) -> None:
        assert len(router) == 4
        assert [r.pattern for r in router.routes] == ["/", "/tags", "/tag/:name", "/post/:id"]

    def test_reregister_replaces_in_place(self, router: Router) -> None:
        router.register("/tag/:name", _post)

        assert len(router) == 4
        assert router.routes[2].handler is _post
        assert router.resolve("/tag/x").handler is _post

    def test_reregister_static(self, router: Router) -> None:
        router.register("/tags", _home)
        assert router.resolve("/tags").handler is _home
        assert len(router) == 4

    def test_decorator(self) -> None:
        r = Router()

        @r.route("/about", name="about")
        def about(params: dict[str, str], query: QueryParams) -> str:
            return "about"

        assert r.resolve("/about").route.name == "about"
        assert about({}, QueryParams()) == "about"
