import datetime
import logging
from typing import Iterable, Optional

from feedgen.feed import FeedGenerator

from markpress.schemas.post import PartialPost
from markpress.settings import SiteConfig

logger = logging.getLogger(__name__)


def build_feed(posts: Iterable[PartialPost], site: SiteConfig) -> bytes:
    """RSS 2.0 feed of the given posts, kept in the order they are passed."""
    feed_url = f"{site.base_url.rstrip('/')}/feed.xml"
    fg = FeedGenerator()
    fg.load_extension("dc")
    fg.id(feed_url)
    fg.title(site.site_name)
    fg.language("en")
    fg.link(href=feed_url, rel="self")
    fg.link(href=site.base_url, rel="alternate")
    fg.description(site.site_description)

    for post in posts:
        post_url = site.post_url(post.slug)
        fe = fg.add_entry(order="append")
        fe.id(post_url)
        fe.title(post.title)
        fe.link(href=post_url)
        if post.description:
            fe.description(post.description)
        if post.author is not None:
            # RSS <author> needs an email, so the name goes in dc:creator
            fe.dc.dc_creator(post.author.name)
        published = parse_post_date(post.date)
        if published is not None:
            fe.pubDate(published)

    return fg.rss_str(pretty=True)


def parse_post_date(value: Optional[str]) -> Optional[datetime.datetime]:
    if not value:
        return None
    try:
        published = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable post date {value!r}, omitting from feed")
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=datetime.timezone.utc)
    return published
