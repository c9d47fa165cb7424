"""Sheet listing: render a published spreadsheet CSV as one sorted apartment table."""

__version__ = "0.1.0"
