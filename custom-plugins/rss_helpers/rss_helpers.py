#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Filters for writing feed templates by hand."""

# Standard modules
import datetime
from email.utils import format_datetime
from urllib.parse import urljoin

# Third-party modules
from bs4 import BeautifulSoup
from markupsafe import Markup
from pelican import signals

URL_ATTRIBUTES = ('href', 'src')


def _utc(value):
  if not isinstance(value, datetime.datetime):
    value = datetime.datetime.combine(value, datetime.time())
  if value.tzinfo is None:
    return value.replace(tzinfo=datetime.timezone.utc)
  return value.astimezone(datetime.timezone.utc)


def absolute_url(url, base):
  return urljoin(base, url)


def html_to_absolute_urls(html, base):
  soup = BeautifulSoup(html, 'html.parser')
  for attribute in URL_ATTRIBUTES:
    for tag in soup.find_all(attrs={attribute: True}):
      tag[attribute] = urljoin(base, tag[attribute])
  return Markup(str(soup))


def date_to_rfc3339(value):
  return _utc(value).replace(tzinfo=None).isoformat() + 'Z'


def date_to_rfc822(value):
  return format_datetime(_utc(value))


def newest_item_date(items):
  dates = [
      _utc(getattr(item, 'modified', None) or item.date)
      for item in items or ()]
  return max(dates) if dates else None


def add_filters(generator):
  generator.env.filters.update({
      'absoluteUrl': absolute_url,
      'htmlToAbsoluteUrls': html_to_absolute_urls,
      'dateToRfc3339': date_to_rfc3339,
      'dateToRfc822': date_to_rfc822,
      'getNewestCollectionItemDate': newest_item_date})


def register():
  signals.generator_init.connect(add_filters)
