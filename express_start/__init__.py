"""express-start -- scaffold Express.js server projects from a wizard."""

__version__ = "1.0.0"
