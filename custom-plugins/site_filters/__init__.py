from .site_filters import *
