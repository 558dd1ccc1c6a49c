AUTHOR = 'Your Name Here'
SITENAME = 'Base Blog'
SITEURL = ''
TIMEZONE = 'UTC'
DEFAULT_LANG = 'en'
DEFAULT_DATE = 'fs'
DEFAULT_PAGINATION = 10

# Plugin configuration
PLUGIN_PATHS = ['custom-plugins']
PLUGINS = [
    'site_filters',
    'heading_anchors',
    'navigation',
    'syntax_highlight',
    'rss_helpers',
    'template_engines']

# Plugin: template_engines
# Control which files are processed, e.g.: *.md, *.njk, *.html, *.liquid
TEMPLATE_FORMATS = ['md', 'njk', 'html', 'liquid']
# Pre-process *.md and *.html files with the Jinja environment ('njk').
MARKDOWN_TEMPLATE_ENGINE = 'njk'
HTML_TEMPLATE_ENGINE = 'njk'
DATA_DIR = '_data'

# Plugin: site_filters
# If the site deploys to a subdirectory, change PATH_PREFIX. Leading and
# trailing slashes are normalized; '' and '/' do the same thing. This is only
# used for link URLs through the `url` filter, it does not affect the output
# file structure. Override per build with `invoke build --path-prefix=...`.
PATH_PREFIX = '/'

# Directory roles: input, includes, data and output
PATH = '.'
ARTICLE_PATHS = ['posts']
PAGE_PATHS = ['pages']
INCLUDES_DIR = '_includes'
THEME_TEMPLATES_OVERRIDES = [INCLUDES_DIR]
IGNORE_FILES = ['.#*', '_*']
OUTPUT_PATH = '_site'

# Copy the `img` and `css` folders to the output
STATIC_PATHS = ['img', 'css']

ARTICLE_URL = 'posts/{slug}/'
ARTICLE_SAVE_AS = 'posts/{slug}/index.html'
PAGE_URL = '{slug}/'
PAGE_SAVE_AS = '{slug}/index.html'
TAG_URL = 'tags/{slug}/'
TAG_SAVE_AS = 'tags/{slug}/index.html'

# Markdown: raw HTML, line breaks, bare links and heading permalinks
MARKDOWN = {
    'extension_configs': {
        'markdown.extensions.codehilite': {'css_class': 'highlight'},
        'markdown.extensions.extra': {},
        'markdown.extensions.meta': {},
        'markdown.extensions.nl2br': {},
        'markdown.extensions.toc': {
            'permalink': '#',
            'permalink_class': 'direct-link',
            'toc_depth': '1-4'},
        'pymdownx.magiclink': {},
    },
    'output_format': 'html5',
}
PYGMENTS_STYLE = 'github'

# Plugin: heading_anchors
# Heading permalinks stop at h4 and are hidden from screen readers.
HEADING_PERMALINK_DEPTH = 4

# Disable feed creation for development
FEED_ALL_ATOM = None
FEED_ALL_RSS = None
CATEGORY_FEED_ATOM = None
TRANSLATION_FEED_ATOM = None
AUTHOR_FEED_ATOM = None
AUTHOR_FEED_RSS = None
