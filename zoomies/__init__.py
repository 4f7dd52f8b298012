"""Lucy Zoomies - a dog, a park full of treats, and people to dodge."""

__version__ = "0.1.0"
