"""gctx - switch between named cloud configuration profiles"""

__version__ = "0.3.0"
