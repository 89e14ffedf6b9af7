"""bidwin — grounded answers, compliance audits, and knowledge vault management."""

__version__ = "0.1.0"
