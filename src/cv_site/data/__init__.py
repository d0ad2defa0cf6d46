"""Static CV content and wizard example data."""

from cv_site.data.content import CV_CONTENT

__all__ = ["CV_CONTENT"]
