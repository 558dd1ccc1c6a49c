#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Template formats, source pre-processing and global data.

Only the extensions named in TEMPLATE_FORMATS are read as content. Markdown
and HTML sources are rendered through the site's Jinja environment before
they are parsed when MARKDOWN_TEMPLATE_ENGINE / HTML_TEMPLATE_ENGINE is
'njk'; `.njk` and `.liquid` sources are always rendered. Every JSON file in
DATA_DIR becomes a template variable named after the file.
"""

# Standard modules
import json
import logging
import os

# Third-party modules
from jinja2 import Environment
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pelican import signals
from pelican.readers import HTMLReader, MarkdownReader
from pelican.utils import pelican_open

logger = logging.getLogger(__name__)

JINJA_ENGINE = 'njk'
TEMPLATE_ONLY_FORMATS = ('njk', 'liquid')


class JinjaPreprocessor(Preprocessor):
  """Renders the Markdown source, with its metadata available as `page`."""

  def __init__(self, md, render):
    super().__init__(md)
    self.render = render

  def run(self, lines):
    meta = getattr(self.md, 'Meta', None) or {}
    page = {
        key: values[0] if len(values) == 1 else values
        for key, values in meta.items()}
    return self.render('\n'.join(lines), page).split('\n')


class JinjaPreprocessExtension(Extension):
  def __init__(self, render, **kwargs):
    self.render = render
    super().__init__(**kwargs)

  def extendMarkdown(self, md):
    # After the metadata header is stripped (27), before raw HTML is stashed.
    md.preprocessors.register(JinjaPreprocessor(md, self.render), 'jinja', 26)


class TemplateRenderingMixin(object):
  environment = None
  context = None

  def bind(self, environment, context):
    self.environment = environment
    self.context = context

  def render(self, text, page=None):
    environment = self.environment or Environment()
    context = dict(self.context or {})
    if page is not None:
      context['page'] = page
    rendered = environment.from_string(text).render(context)
    # Jinja drops a single trailing newline unless keep_trailing_newline is set.
    if text.endswith('\n') and not environment.keep_trailing_newline:
      rendered += '\n'
    return rendered


class JinjaMarkdownReader(TemplateRenderingMixin, MarkdownReader):
  def __init__(self, *args, **kwargs):
    super().__init__(*args, **kwargs)
    if self.settings.get('MARKDOWN_TEMPLATE_ENGINE') == JINJA_ENGINE:
      markdown = dict(self.settings['MARKDOWN'])
      markdown['extensions'] = list(markdown.get('extensions', ())) + [
          JinjaPreprocessExtension(self.render)]
      # Settings are shared between readers, extend a private copy.
      self.settings = dict(self.settings, MARKDOWN=markdown)


class JinjaHTMLReader(TemplateRenderingMixin, HTMLReader):
  file_extensions = ['html', 'htm'] + list(TEMPLATE_ONLY_FORMATS)

  def renders(self, filename):
    extension = os.path.splitext(filename)[1].lstrip('.')
    return (extension in TEMPLATE_ONLY_FORMATS or
            self.settings.get('HTML_TEMPLATE_ENGINE') == JINJA_ENGINE)

  def read(self, filename):
    with pelican_open(filename) as content:
      if self.renders(filename):
        content = self.render(content)
      parser = self._HTMLParser(self.settings, filename)
      parser.feed(content)
      parser.close()
    metadata = {}
    for key in parser.metadata:
      metadata[key] = self.process_metadata(key, parser.metadata[key])
    return parser.body, metadata


def reader_classes_for(formats):
  """Maps every template format to the reader class that handles it."""
  classes = {}
  for extension in formats:
    if extension in MarkdownReader.file_extensions:
      classes[extension] = JinjaMarkdownReader
    elif extension in JinjaHTMLReader.file_extensions:
      classes[extension] = JinjaHTMLReader
    else:
      raise ValueError('Unsupported template format {!r}'.format(extension))
  return classes


def select_readers(readers):
  formats = readers.settings.get('TEMPLATE_FORMATS')
  if not formats:
    return
  classes = reader_classes_for(formats)
  logger.debug('Reading template formats: %s', ', '.join(classes))
  # The static generator reads every file through the 'static' reader.
  static = readers.reader_classes.get('static')
  readers.reader_classes.clear()
  readers.reader_classes.update(classes)
  if static is not None:
    readers.reader_classes['static'] = static


def load_global_data(path):
  """Loads every JSON file in `path`, keyed by the file name without suffix."""
  data = {}
  if not os.path.isdir(path):
    return data
  for filename in sorted(os.listdir(path)):
    name, extension = os.path.splitext(filename)
    if extension != '.json':
      continue
    full_path = os.path.join(path, filename)
    with open(full_path, encoding='utf-8') as data_file:
      try:
        data[name] = json.load(data_file)
      except ValueError as exc:
        raise ValueError(
            'Could not parse global data file {}: {}'.format(
                full_path, exc)) from exc
  return data


def bind_readers(generator):
  data_dir = os.path.join(
      generator.path, generator.settings.get('DATA_DIR', '_data'))
  for name, value in load_global_data(data_dir).items():
    generator.context.setdefault(name, value)
  for reader in generator.readers.readers.values():
    if isinstance(reader, TemplateRenderingMixin):
      reader.bind(generator.env, generator.context)


def register():
  signals.readers_init.connect(select_readers)
  signals.generator_init.connect(bind_readers)
