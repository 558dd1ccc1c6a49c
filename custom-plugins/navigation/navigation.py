#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Hierarchical site navigation built from content metadata.

A page joins the navigation by declaring `nav_key` in its metadata. Optional
fields are `nav_parent` (key of the parent entry), `nav_order` (integer,
lower sorts first), `nav_title` and `nav_url`. Three filters are provided:

  {{ collections.all | navigation }}
  {{ collections.all | navigationBreadcrumb(page.nav_key) }}
  {{ collections.all | navigation | navigationToHtml(active_key='about') }}
"""

# Standard modules
import functools
import logging
import re

# Third-party modules
from markupsafe import Markup, escape
from pelican import signals

logger = logging.getLogger(__name__)

ABSOLUTE_URL = re.compile(r'^([a-z][a-z0-9+.-]*:|//)', re.IGNORECASE)


class NavEntry(object):
  def __init__(self, key, title, url, parent=None, order=0, item=None):
    self.key = key
    self.title = title
    self.url = url
    self.parent = parent
    self.order = order
    self.item = item
    self.children = []

  def __repr__(self):
    return '<NavEntry {!r} parent={!r}>'.format(self.key, self.parent)


def _metadata(item):
  metadata = getattr(item, 'metadata', None)
  if metadata is None and isinstance(item, dict):
    metadata = item
  return metadata or {}


def _order(value, key):
  if value in (None, ''):
    return 0
  try:
    return int(value)
  except (TypeError, ValueError):
    logger.warning('Navigation entry %r has a non-integer order %r', key, value)
    return 0


def page_url(url, path_prefix='/'):
  """Roots a content url like `posts/one/` at the site's path prefix."""
  if not url or ABSOLUTE_URL.match(url) or url.startswith('/'):
    return url
  prefix = (path_prefix or '').strip('/')
  return '/' + (prefix + '/' if prefix else '') + url


def nav_entries(items, path_prefix='/'):
  """Returns a NavEntry for every item that declares a `nav_key`."""
  entries = []
  for item in items or ():
    metadata = _metadata(item)
    key = metadata.get('nav_key')
    if not key:
      continue
    entries.append(NavEntry(
        key=key,
        title=metadata.get('nav_title') or getattr(item, 'title', None) or key,
        url=metadata.get('nav_url') or page_url(
            getattr(item, 'url', None) or '', path_prefix),
        parent=metadata.get('nav_parent') or None,
        order=_order(metadata.get('nav_order'), key),
        item=item))
  return entries


def _build_tree(entries, parent_key, ancestors=()):
  children = sorted(
      (entry for entry in entries if entry.parent == parent_key),
      key=lambda entry: entry.order)
  for child in children:
    if child.key in ancestors:
      raise ValueError(
          'Navigation entry {!r} is its own ancestor'.format(child.key))
    child.children = _build_tree(entries, child.key, ancestors + (child.key,))
  return children


def navigation(items, active_key=None, path_prefix='/'):
  """Returns the entries below `active_key` (the roots if None) as a tree."""
  return _build_tree(nav_entries(items, path_prefix), active_key)


def navigation_breadcrumb(
    items, key, include_self=False, allow_missing=False, path_prefix='/'):
  """Returns the ancestors of the entry `key`, root first."""
  by_key = {entry.key: entry for entry in nav_entries(items, path_prefix)}
  if key not in by_key:
    if allow_missing:
      return []
    raise KeyError('No navigation entry with key {!r}'.format(key))
  crumbs = [by_key[key]] if include_self else []
  seen = {key}
  parent = by_key[key].parent
  while parent is not None:
    if parent in seen:
      raise ValueError(
          'Circular navigation parents starting at {!r}'.format(key))
    seen.add(parent)
    if parent not in by_key:
      if allow_missing:
        break
      raise KeyError('No navigation entry with key {!r}'.format(parent))
    crumbs.append(by_key[parent])
    parent = by_key[parent].parent
  crumbs.reverse()
  return crumbs


def navigation_to_html(
    entries, active_key=None, list_element='ul', list_item_element='li',
    list_class='', active_list_item_class='active', anchor_class=''):
  """Renders a navigation tree as nested list markup."""
  def render(level):
    if not level:
      return ''
    parts = ['<{}{}>'.format(list_element, _class_attr(list_class))]
    for entry in level:
      active = active_key is not None and entry.key == active_key
      parts.append('<{}{}>'.format(
          list_item_element,
          _class_attr(active_list_item_class if active else '')))
      parts.append('<a href="{}"{}{}>{}</a>'.format(
          escape(entry.url),
          _class_attr(anchor_class),
          ' aria-current="page"' if active else '',
          escape(entry.title)))
      parts.append(render(entry.children))
      parts.append('</{}>'.format(list_item_element))
    parts.append('</{}>'.format(list_element))
    return ''.join(parts)
  return Markup(render(entries or []))


def _class_attr(name):
  return ' class="{}"'.format(escape(name)) if name else ''


def add_filters(generator):
  path_prefix = generator.settings.get('PATH_PREFIX', '/')
  generator.env.filters.update({
      'navigation': functools.partial(navigation, path_prefix=path_prefix),
      'navigationBreadcrumb': functools.partial(
          navigation_breadcrumb, path_prefix=path_prefix),
      'navigationToHtml': navigation_to_html})


def register():
  signals.generator_init.connect(add_filters)
