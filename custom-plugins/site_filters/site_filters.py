#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Template filters and collections shared by every page of the site.

Filters are registered under the names page authors use in templates:
readableDate, htmlDateString, head, min, filterTagList and url. The
`collections` context variable exposes `all` content and the `tagList`.
"""

# Standard modules
from collections.abc import Sequence
import datetime
import logging
import re

# Third-party modules
from pelican import signals

logger = logging.getLogger(__name__)

EXCLUDED_TAGS = frozenset(['all', 'nav', 'post', 'posts'])
MONTH_ABBREVIATIONS = (
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
ABSOLUTE_URL = re.compile(r'^([a-z][a-z0-9+.-]*:|//)', re.IGNORECASE)


def _utc_date(value):
  """Returns the calendar date of `value` in UTC.

  Aware datetimes are converted, naive ones are taken to be UTC already.
  """
  if isinstance(value, datetime.datetime):
    if value.tzinfo is not None:
      value = value.astimezone(datetime.timezone.utc)
    return value.date()
  if isinstance(value, datetime.date):
    return value
  raise TypeError('Expected a date or datetime, got {!r}'.format(value))


def readable_date(value):
  date = _utc_date(value)
  return '{:02d} {} {:04d}'.format(
      date.day, MONTH_ABBREVIATIONS[date.month - 1], date.year)


def html_date_string(value):
  # https://html.spec.whatwg.org/multipage/common-microsyntaxes.html#valid-date-string
  date = _utc_date(value)
  return '{:04d}-{:02d}-{:02d}'.format(date.year, date.month, date.day)


def head(sequence, n):
  """Get the first `n` elements of a collection, the last `-n` if negative."""
  if isinstance(sequence, (str, bytes)) or not isinstance(sequence, Sequence):
    return []
  if not sequence:
    return []
  if n < 0:
    return list(sequence[n:])
  return list(sequence[:n])


def minimum(*numbers):
  """Return the smallest number argument."""
  return min(numbers, default=float('inf'))


def filter_tag_list(tags):
  return [tag for tag in tags or () if str(tag) not in EXCLUDED_TAGS]


def normalize_path_prefix(prefix):
  stripped = (prefix or '').strip('/')
  return '/{}/'.format(stripped) if stripped else '/'


def prefixed_url(path, prefix='/'):
  if ABSOLUTE_URL.match(path):
    return path
  return normalize_path_prefix(prefix) + path.lstrip('/')


def collect_tag_list(items):
  """Returns every distinct tag used by `items`, minus the structural tags."""
  tag_set = {}
  for item in items:
    for tag in getattr(item, 'tags', None) or ():
      tag_set.setdefault(tag, None)
  return filter_tag_list(tag_set)


def all_content(generators):
  articles, pages, hidden_pages = [], [], []
  for generator in generators:
    articles.extend(getattr(generator, 'articles', ()))
    pages.extend(getattr(generator, 'pages', ()))
    hidden_pages.extend(getattr(generator, 'hidden_pages', ()))
  return articles + pages + hidden_pages


def add_filters(generator):
  path_prefix = generator.settings.get('PATH_PREFIX', '/')
  generator.env.filters.update({
      'readableDate': readable_date,
      'htmlDateString': html_date_string,
      'head': head,
      'min': minimum,
      'filterTagList': filter_tag_list,
      'url': lambda path: prefixed_url(path, path_prefix)})


def add_collections(generators):
  if not generators:
    return
  items = all_content(generators)
  collections = {'all': items, 'tagList': collect_tag_list(items)}
  logger.debug(
      'Collected %d items and %d tags',
      len(items), len(collections['tagList']))
  # Generators share a single context dictionary
  generators[0].context['collections'] = collections


def register():
  signals.generator_init.connect(add_filters)
  signals.all_generators_finalized.connect(add_collections)
