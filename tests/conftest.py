from __future__ import annotations

import pytest

from pubtimeline.models import ArticleRecord, LifecycleTimestamps

CURRENT_PAGE = """
<html><body>
<h1 class="c-article-title">Current <i>layout</i> article</h1>
<section class="c-bibliographic-information">
  <div class="c-bibliographic-information__column">
    <ul class="c-bibliographic-information__list">
      <li class="c-bibliographic-information__list-item">
        <h4>Received</h4>
        <p class="c-bibliographic-information__value"><time datetime="2020-01-01">01 January 2020</time></p>
      </li>
      <li class="c-bibliographic-information__list-item">
        <h4>Accepted</h4>
        <p class="c-bibliographic-information__value"><time datetime="2020-01-15">15 January 2020</time></p>
      </li>
      <li class="c-bibliographic-information__list-item">
        <h4>Published</h4>
        <p class="c-bibliographic-information__value"><time datetime="2020-02-20">20 February 2020</time></p>
      </li>
      <li class="c-bibliographic-information__list-item">
        <h4>Issue Date</h4>
        <p class="c-bibliographic-information__value"><time datetime="2020-03">March 2020</time></p>
      </li>
      <li class="c-bibliographic-information__list-item">
        <h4>DOI</h4>
        <p class="c-bibliographic-information__value"><a href="https://doi.org/10.1038/s41586-020-2000-1">https://doi.org/10.1038/s41586-020-2000-1</a></p>
      </li>
      <li class="c-bibliographic-information__list-item">
        <h4>Share this article</h4>
        <p class="c-bibliographic-information__value">Anyone you share the following link with</p>
      </li>
    </ul>
  </div>
</section>
</body></html>
"""

LEGACY_PAGE = """
<html><body>
<h1 itemprop="name headline">Legacy article</h1>
<div id="article-info-content">
  <div class="grid">
    <div><h4>Received</h4><p><time datetime="2015-05-03">03 May 2015</time></p></div>
    <div><h4>Accepted</h4><p><time datetime="2015-06-10">10 June 2015</time></p></div>
    <div><h4>Published</h4><p><time datetime="2015-07-22">22 July 2015</time></p></div>
  </div>
  <h3 class="strong mb4"><abbr title="Digital Object Identifier">DOI</abbr></h3>
  <p class="standard-space-below text14"><a href="/doi/10.1038/nature14000">doi:10.1038/nature14000</a></p>
</div>
</body></html>
"""

UNKNOWN_PAGE = """
<html><body><h1>Page not found</h1><p>Sorry, the page you requested is unavailable.</p></body></html>
"""


@pytest.fixture
def current_page() -> str:
    return CURRENT_PAGE


@pytest.fixture
def legacy_page() -> str:
    return LEGACY_PAGE


@pytest.fixture
def unknown_page() -> str:
    return UNKNOWN_PAGE


@pytest.fixture
def sample_record() -> ArticleRecord:
    return ArticleRecord(
        title="Sample Study",
        link="https://www.nature.com/articles/s41586-020-2000-1",
        doi="https://doi.org/10.1038/s41586-020-2000-1",
        time=LifecycleTimestamps(
            received="01 January 2020",
            accepted="15 January 2020",
            published="20 February 2020",
            issuedate="March 2020",
        ),
    )
