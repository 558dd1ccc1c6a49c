from .syntax_highlight import *
