#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Limits the `toc` permalink anchors to the top heading levels.

The toc extension adds a permalink to every heading. This keeps the ones on
h1 to h(HEADING_PERMALINK_DEPTH), hides them from assistive technology and
drops the rest.
"""

# Third-party modules
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from pelican import signals

TOC_EXTENSION = 'markdown.extensions.toc'
HEADINGS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6')


def _remove(parent, child):
  """Removes `child` from `parent`, keeping the text that follows it."""
  if child.tail:
    index = list(parent).index(child)
    if index:
      previous = parent[index - 1]
      previous.tail = (previous.tail or '') + child.tail
    else:
      parent.text = (parent.text or '') + child.tail
  parent.remove(child)


class HeadingAnchorTreeprocessor(Treeprocessor):
  def __init__(self, md, depth, permalink_class):
    super().__init__(md)
    self.depth = depth
    self.permalink_class = permalink_class

  def run(self, root):
    headings = [element for element in root.iter() if element.tag in HEADINGS]
    for heading in headings:
      level = int(heading.tag[1])
      for anchor in list(heading):
        if anchor.tag != 'a' or anchor.get('class') != self.permalink_class:
          continue
        if level > self.depth:
          _remove(heading, anchor)
        else:
          anchor.attrib.pop('title', None)
          anchor.set('aria-hidden', 'true')


class HeadingAnchorExtension(Extension):
  def __init__(self, **kwargs):
    self.config = {
        'depth': [4, 'Deepest heading level that keeps its permalink'],
        'permalink_class': ['headerlink', 'Class of the toc permalinks'],
    }
    super().__init__(**kwargs)

  def extendMarkdown(self, md):
    # Runs after the toc treeprocessor (5) has added the permalinks.
    md.treeprocessors.register(
        HeadingAnchorTreeprocessor(
            md, int(self.getConfig('depth')),
            self.getConfig('permalink_class')),
        'heading_anchors', 4)


def add_extension(pelican):
  markdown = pelican.settings['MARKDOWN']
  extensions = markdown.setdefault('extensions', [])
  if any(isinstance(ext, HeadingAnchorExtension) for ext in extensions):
    return
  toc = markdown.get('extension_configs', {}).get(TOC_EXTENSION, {})
  extensions.append(HeadingAnchorExtension(
      depth=pelican.settings.get('HEADING_PERMALINK_DEPTH', 4),
      permalink_class=toc.get('permalink_class', 'headerlink')))


def register():
  signals.initialized.connect(add_extension)
