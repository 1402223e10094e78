"""Command-line interface for receiptsplit.

Usage:
    receiptsplit parse [text_file] [--json]
    receiptsplit scan <image> [--ocr-url URL] [--json]
    receiptsplit split <text_file> <assignments.toml>
    receiptsplit serve [--host] [--port]
"""
