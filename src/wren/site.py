"""The blog site — services wired together and the route table.

Constructs every service once and passes them to each other explicitly;
nothing in wren is a module-level singleton.

Usage::

    site = Site(SiteConfig(base_url="https://example.org/"))
    async with anyio.create_task_group() as tg:
        await tg.start(site.run)
        site.navigator.navigate("/tag/python")
"""

import logging
from datetime import date
from typing import Any
from urllib.parse import quote

import anyio
from anyio.abc import TaskGroup, TaskStatus
from kida.template import Markup

from wren.config import SiteConfig
from wren.content.loader import ResourceLoader
from wren.content.models import StatEntry, TimelineMonth, TimelineYear
from wren.content.store import PostStore
from wren.content.text import calculate_read_time
from wren.markdown import MarkdownRenderer
from wren.navigation import Navigator
from wren.rendering.integration import create_environment
from wren.rendering.returns import Template
from wren.rendering.surface import RenderSurface, TemplateSurface
from wren.routing.location import Location
from wren.routing.query import QueryParams
from wren.routing.router import Router
from wren.search.debounce import SearchSession
from wren.search.index import SearchIndex, SearchResults

logger = logging.getLogger("wren.site")

NAV_LINKS = ("#/", "#/timeline", "#/categories", "#/tags", "#/about")


def _ranked(stats: dict[str, int]) -> list[StatEntry]:
    """Stat entries by descending count; equal counts keep first-seen order."""
    return sorted((StatEntry(name, count) for name, count in stats.items()), key=lambda e: -e.count)


class Site:
    """The blog: post store, search index, router and navigator."""

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        loader: ResourceLoader | None = None,
        surface: RenderSurface | None = None,
        location: Location | None = None,
        markdown: MarkdownRenderer | None = None,
    ) -> None:
        self.config = config or SiteConfig()
        self.loader = loader or ResourceLoader(self.config)
        self.store = PostStore(self.loader, self.config)
        self.search_index = SearchIndex.from_config((), self.config)
        self.markdown = markdown or MarkdownRenderer.from_config(self.config)
        self.env = create_environment(self.config)
        self.surface: RenderSurface = surface or TemplateSurface(
            self.env, site_title=self.config.site_title
        )
        self.router = Router()
        self.navigator = Navigator(
            self.router,
            self.surface,
            location=location,
            nav_links=NAV_LINKS,
            discard_stale=self.config.discard_stale_navigations,
        )
        self.register_routes()

    # -- Lifecycle --

    async def start(self) -> bool:
        """Load the post index and build the search index from it.

        Returns False when the index could not be loaded; the site still
        runs, with an empty collection.
        """
        loaded = await self.store.load()
        if not loaded:
            logger.warning("Post index unavailable; starting with no posts")
        self.search_index.build(self.store.get_all())
        return loaded

    async def run(self, *, task_status: TaskStatus[Any] = anyio.TASK_STATUS_IGNORED) -> None:
        """Start the site, then handle navigations until the location closes."""
        await self.start()
        await self.navigator.run(task_status=task_status)

    async def aclose(self) -> None:
        await self.loader.aclose()

    # -- Search --

    def search_session(self, task_group: TaskGroup, on_results: Any = None) -> SearchSession:
        """Create a debounced search session bound to this site's index."""
        return SearchSession(
            self.search_index,
            task_group,
            on_results,
            delay=self.config.search_debounce,
        )

    def render_search_results(self, results: SearchResults) -> str:
        """Render search-modal markup: a hint, a no-results note, or hits."""
        template = self.env.get_template("search_results.html")
        return template.render({"results": results, "count": len(results), "keyword": results.keyword.strip()})

    def go_to_post(self, post_id: str) -> None:
        self.navigator.navigate(f"/post/{quote(post_id, safe='')}")

    # -- Routes --

    def register_routes(self) -> None:
        register = self.router.register
        register("/", self.home, name="home")
        register("/timeline", self.timeline, name="timeline")
        register("/categories", self.categories, name="categories")
        register("/category/:name", self.category, name="category")
        register("/tags", self.tags, name="tags")
        register("/tag/:name", self.tag, name="tag")
        register("/post/:id", self.post, name="post")
        register("/about", self.about, name="about")
        register("/search", self.search, name="search")

    def home(self, params: dict[str, str], query: QueryParams) -> Template:
        return Template("index.html", page_title="首页", posts=self.store.get_all())

    def timeline(self, params: dict[str, str], query: QueryParams) -> Template:
        years = [
            TimelineYear(
                year,
                [TimelineMonth(date(year, month, 1), posts) for month, posts in months.items()],
            )
            for year, months in self.store.group_by_date().items()
        ]
        return Template(
            "timeline.html",
            page_title="时间轴",
            years=years,
            stats=self.store.get_stats(),
        )

    def categories(self, params: dict[str, str], query: QueryParams) -> Template:
        entries = _ranked(self.store.get_category_stats())
        return Template(
            "stats.html",
            page_title="分类",
            heading="分类",
            kind="category",
            entries=entries,
            count=len(entries),
        )

    def category(self, params: dict[str, str], query: QueryParams) -> Template:
        name = params["name"]
        posts = self.store.get_by_category(name)
        return Template(
            "filtered.html",
            page_title=name,
            heading=name,
            kind="category",
            posts=posts,
            count=len(posts),
        )

    def tags(self, params: dict[str, str], query: QueryParams) -> Template:
        entries = _ranked(self.store.get_tag_stats())
        return Template(
            "stats.html",
            page_title="标签",
            heading="标签",
            kind="tag",
            entries=entries,
            count=len(entries),
        )

    def tag(self, params: dict[str, str], query: QueryParams) -> Template:
        name = params["name"]
        posts = self.store.get_by_tag(name)
        return Template(
            "filtered.html",
            page_title=name,
            heading=name,
            kind="tag",
            posts=posts,
            count=len(posts),
        )

    async def post(self, params: dict[str, str], query: QueryParams) -> Template:
        post = self.store.get_by_id(params["id"])
        if post is None:
            return Template("article_error.html", page_title="文章未找到", reason="missing")

        payload = await self.store.load_content(post.filename)
        if payload is None:
            return Template("article_error.html", page_title="加载失败", reason="load_failed")

        adjacent = self.store.get_adjacent_posts(post.id)
        return Template(
            "article.html",
            page_title=post.title,
            post=post,
            metadata=payload.metadata,
            read_time=post.read_time or calculate_read_time(payload.content),
            body=Markup(self.markdown.render(payload.content)),
            prev=adjacent.prev,
            next=adjacent.next,
        )

    def about(self, params: dict[str, str], query: QueryParams) -> Template:
        return Template(
            "about.html",
            page_title="关于",
            tagline="一个热爱技术与生活的人",
            stats=self.store.get_stats(),
        )

    def search(self, params: dict[str, str], query: QueryParams) -> Template:
        keyword = query.get("q", "")
        posts = self.store.search(keyword) if keyword else []
        heading = f"搜索: {keyword}"
        return Template(
            "filtered.html",
            page_title=heading,
            heading=heading,
            kind="search",
            posts=posts,
            count=len(posts),
        )
