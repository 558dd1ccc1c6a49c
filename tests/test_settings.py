import os

import pelicanconf
import publishconf
import tasks

from template_engines.template_engines import reader_classes_for


def test_directory_roles():
  assert pelicanconf.PATH == '.'
  assert pelicanconf.THEME_TEMPLATES_OVERRIDES == ['_includes']
  assert pelicanconf.DATA_DIR == '_data'
  assert pelicanconf.OUTPUT_PATH == '_site'


def test_passthrough_copy():
  assert pelicanconf.STATIC_PATHS == ['img', 'css']


def test_plugins_exist():
  root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
  for name in pelicanconf.PLUGINS:
    for path in pelicanconf.PLUGIN_PATHS:
      assert os.path.isfile(os.path.join(root, path, name, '__init__.py'))


def test_template_formats_are_readable():
  assert sorted(reader_classes_for(pelicanconf.TEMPLATE_FORMATS)) == [
      'html', 'liquid', 'md', 'njk']
  assert pelicanconf.MARKDOWN_TEMPLATE_ENGINE == 'njk'
  assert pelicanconf.HTML_TEMPLATE_ENGINE == 'njk'


def test_markdown_permalinks():
  toc = pelicanconf.MARKDOWN['extension_configs']['markdown.extensions.toc']
  assert toc == {
      'permalink': '#', 'permalink_class': 'direct-link', 'toc_depth': '1-4'}


def test_publish_enables_feeds():
  assert pelicanconf.FEED_ALL_RSS is None
  assert publishconf.FEED_ALL_RSS == 'feed/feed.rss'
  assert publishconf.OUTPUT_PATH == pelicanconf.OUTPUT_PATH


def test_pelican_command_path_prefix():
  assert tasks.pelican_command('pelicanconf.py') == 'pelican -s pelicanconf.py'
  assert tasks.pelican_command('publishconf.py', path_prefix='blog') == (
      "pelican -s publishconf.py -e 'PATH_PREFIX=\"blog\"'")


def test_serve_root_matches_output():
  assert tasks.CONFIG['deploy_dir'].rstrip('/') == pelicanconf.OUTPUT_PATH
