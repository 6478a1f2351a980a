"""Core logic for JSON SQL Explorer.

The Gradio UI lives in `app.py`. This package contains the pieces it calls:
- parse JSON text into records
- rewrite SQL so a table alias points at the loaded records
- run the rewritten SQL on an in-memory DuckDB connection
- keep a per-session query history
"""
