from .rss_helpers import *
