from types import SimpleNamespace

import markdown

from heading_anchors import heading_anchors
from heading_anchors.heading_anchors import HeadingAnchorExtension

TOC_CONFIG = {'permalink': '#', 'permalink_class': 'direct-link'}


def convert(text, depth=4):
  md = markdown.Markdown(
      extensions=[
          'markdown.extensions.toc',
          HeadingAnchorExtension(depth=depth, permalink_class='direct-link')],
      extension_configs={'markdown.extensions.toc': TOC_CONFIG})
  return md.convert(text)


def test_top_levels_keep_hidden_permalink():
  html = convert('## Section')
  assert html == (
      '<h2 id="section">Section'
      '<a aria-hidden="true" class="direct-link" href="#section">#</a></h2>')


def test_deep_levels_lose_permalink():
  html = convert('#### four\n\n##### five\n\n###### six')
  assert html.count('direct-link') == 1
  assert '<h5 id="five">five</h5>' in html
  assert '<h6 id="six">six</h6>' in html


def test_depth_is_configurable():
  assert 'direct-link' not in convert('## two', depth=1)


def test_other_links_untouched():
  html = convert('##### [docs](/docs/)')
  assert '<a href="/docs/">docs</a>' in html
  assert 'direct-link' not in html


def test_added_once_to_settings():
  pelican = SimpleNamespace(settings={
      'HEADING_PERMALINK_DEPTH': 3,
      'MARKDOWN': {'extension_configs': {
          'markdown.extensions.toc': TOC_CONFIG}}})
  heading_anchors.add_extension(pelican)
  heading_anchors.add_extension(pelican)
  extension, = pelican.settings['MARKDOWN']['extensions']
  assert extension.getConfig('depth') == 3
  assert extension.getConfig('permalink_class') == 'direct-link'
