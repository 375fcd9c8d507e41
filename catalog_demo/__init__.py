"""Product catalogue demo: listing, auth, forms and data fetching on FastAPI."""

__version__ = "0.1.0"
