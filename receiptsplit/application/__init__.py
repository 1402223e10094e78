"""Application workflows that combine the parser with runtime services."""
