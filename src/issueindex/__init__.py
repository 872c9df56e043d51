"""Front-matter ingestion and issue indexing for publication content."""

__version__ = "0.1.0"
