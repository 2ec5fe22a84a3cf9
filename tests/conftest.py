import pytest

from corriere_news.queries import get_query_set


def _article(title="Breaking News", href="/a/1", summary="desc", img_attrs=None):
    parts = ['<div class="bck-media-news">']
    if title is not None:
        if href is None:
            parts.append(f'<h4 class="title-art-hp">{title}</h4>')
        else:
            parts.append(f'<h4 class="title-art-hp"><a href="{href}">{title}</a></h4>')
    if summary is not None:
        parts.append(f'<p class="subtitle-art">{summary}</p>')
    if img_attrs is not None:
        attrs = " ".join(f'{k}="{v}"' for k, v in img_attrs.items())
        parts.append(f'<img class="is_full_image" {attrs}>')
    parts.append("</div>")
    return "\n".join(parts)


def _page(articles, body=True):
    inner = "\n".join(articles)
    if body:
        inner = f'<section class="body-hp">\n{inner}\n</section>'
    return f"<html><head><title>Corriere</title></head><body>{inner}</body></html>"


@pytest.fixture
def make_article():
    return _article


@pytest.fixture
def make_page():
    return _page


@pytest.fixture
def queries():
    return get_query_set()


@pytest.fixture
def sample_homepage():
    return _page([
        _article(img_attrs={"data-src": "/img.jpg", "src": "/placeholder.gif", "alt": "Alt text"}),
    ])
