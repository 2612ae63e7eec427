"""citation-service: APA, MLA and Chicago citations for books and websites."""

__version__ = "0.1.0"
