# This file is only used if you use `invoke publish` or
# explicitly specify it as your config file.

import os
import sys
sys.path.append(os.curdir)
from pelicanconf import *

SITEURL = 'https://example.com'
RELATIVE_URLS = False

FEED_DOMAIN = SITEURL
FEED_ALL_ATOM = 'feed/feed.xml'
FEED_ALL_RSS = 'feed/feed.rss'

DELETE_OUTPUT_DIRECTORY = True
