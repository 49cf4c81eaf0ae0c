"""webterms - versioned legal documents and their public index."""

__version__ = "0.1.0"
