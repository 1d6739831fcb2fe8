"""ChatPDF: upload a PDF and ask grounded questions about it."""

__version__ = "0.1.0"
