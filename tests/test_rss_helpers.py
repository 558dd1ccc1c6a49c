import datetime
from types import SimpleNamespace

from rss_helpers.rss_helpers import (
    absolute_url, date_to_rfc3339, date_to_rfc822, html_to_absolute_urls,
    newest_item_date)

UTC = datetime.timezone.utc


def test_absolute_url():
  assert absolute_url('/posts/one/', 'https://example.com/blog/') == (
      'https://example.com/posts/one/')
  assert absolute_url('two/', 'https://example.com/blog/') == (
      'https://example.com/blog/two/')


def test_html_to_absolute_urls():
  html = '<p><a href="/a/">A</a> <img src="b.png"/> <a href="https://x.org/">X</a></p>'
  result = html_to_absolute_urls(html, 'https://example.com/blog/')
  assert 'href="https://example.com/a/"' in result
  assert 'src="https://example.com/blog/b.png"' in result
  assert 'href="https://x.org/"' in result


def test_date_to_rfc3339():
  value = datetime.datetime(2024, 1, 3, 12, 30, tzinfo=datetime.timezone(
      datetime.timedelta(hours=2)))
  assert date_to_rfc3339(value) == '2024-01-03T10:30:00Z'
  assert date_to_rfc3339(datetime.date(2024, 1, 3)) == '2024-01-03T00:00:00Z'


def test_date_to_rfc822():
  value = datetime.datetime(2024, 1, 3, 10, 0, tzinfo=UTC)
  assert date_to_rfc822(value) == 'Wed, 03 Jan 2024 10:00:00 +0000'


def test_newest_item_date():
  items = [
      SimpleNamespace(date=datetime.datetime(2024, 1, 3, tzinfo=UTC)),
      SimpleNamespace(
          date=datetime.datetime(2023, 5, 1, tzinfo=UTC),
          modified=datetime.datetime(2024, 2, 1, tzinfo=UTC)),
      SimpleNamespace(date=datetime.datetime(2023, 12, 1)),
  ]
  assert newest_item_date(items) == datetime.datetime(2024, 2, 1, tzinfo=UTC)


def test_newest_item_date_empty():
  assert newest_item_date([]) is None
