from .navigation import *
