"""ultralist: local task store with a quick-add text interpreter."""

__version__ = "0.1.0"
