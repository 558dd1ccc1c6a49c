from .heading_anchors import *
