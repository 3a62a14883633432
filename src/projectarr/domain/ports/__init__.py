from .clock import ClockPort
from .deep_links import DeepLinks, DeepLinksPort

__all__ = ["ClockPort", "DeepLinks", "DeepLinksPort"]
