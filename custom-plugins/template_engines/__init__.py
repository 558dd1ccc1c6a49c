from .template_engines import *
