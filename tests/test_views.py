import pytest

from markpress.schemas.pages import BlogIndexProps, HomeProps, PostProps
from markpress.schemas.post import Author, OgImage, PartialPost
from markpress.views import create_environment, format_date, render_page


@pytest.fixture
def env():
    return create_environment()


def _post(**overrides):
    data = dict(
        slug="hello",
        title="Hello <World>",
        description="A greeting",
        date="2021-06-01",
        author=Author(name="Jane Doe", picture="/jane.png"),
        coverImage="/cover.jpg",
    )
    data.update(overrides)
    return PartialPost(**data)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2021-06-01", "June 1, 2021"),
        ("2020-12-25T10:00:00Z", "December 25, 2020"),
        ("someday", "someday"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_home_page_uses_site_config(env, site):
    html = render_page(env, "home.html", HomeProps(site=site))

    assert "<title>Home | Test Blog</title>" in html
    assert "Notes &amp; Tips" in html
    assert 'href="/blog"' in html
    assert 'href="https://github.com/example"' in html


def test_blog_index_page_lists_hero_and_more_posts(env, site):
    props = BlogIndexProps(
        site=site,
        hero_post=_post(slug="hero", title="Hero"),
        more_posts=[_post(slug="other", title="Other")],
    )

    html = render_page(env, "blog_index.html", props)

    assert "<title>Blog | Test Blog</title>" in html
    assert 'href="/blog/hero"' in html
    assert "More Posts" in html
    assert 'href="/blog/other"' in html
    assert "June 1, 2021" in html


def test_blog_index_page_without_posts_omits_sections(env, site):
    html = render_page(env, "blog_index.html", BlogIndexProps(site=site))

    assert "More Posts" not in html
    assert "hero-post" not in html


def test_post_page_injects_rendered_html_and_escapes_metadata(env, site):
    post = _post(
        path="_posts/hello.md",
        ogImage=OgImage(url="/og.png"),
        content="<h1>Rendered</h1>",
    )
    props = PostProps(page_title=post.title, site=site, post=post)

    html = render_page(env, "post.html", props)

    assert "<h1>Rendered</h1>" in html
    assert "Hello &lt;World&gt;" in html
    assert '<meta property="og:image" content="/og.png">' in html
    assert 'href="https://github.com/example/blog/_posts/hello.md"' in html
    assert '<link rel="canonical" href="https://blog.example.com/blog/hello">' in html
