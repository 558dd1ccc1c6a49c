#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Standard modules
import logging

# Third-party modules
from markupsafe import Markup
from pelican import signals
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


def parse_line_ranges(lines):
  """Turns a line specification like '1,3-5' into [1, 3, 4, 5]."""
  numbers = []
  for part in str(lines or '').replace(' ', ',').split(','):
    if not part:
      continue
    start, _, end = part.partition('-')
    numbers.extend(range(int(start), int(end or start) + 1))
  return numbers


def highlight(code, language, lines=''):
  """Highlights `code` with Pygments, marking the requested `lines`."""
  try:
    lexer = get_lexer_by_name(language)
  except ClassNotFound:
    logger.warning('No lexer for language %r, rendering as plain text', language)
    lexer = TextLexer()
  formatter = HtmlFormatter(
      cssclass='highlight', hl_lines=parse_line_ranges(lines))
  return Markup(pygments_highlight(str(code).strip('\n'), lexer, formatter))


def add_filters(generator):
  generator.env.filters['highlight'] = highlight


def register():
  signals.generator_init.connect(add_filters)
