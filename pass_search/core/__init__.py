"""
Core query logic.

Exception hierarchy and pure query string construction. Import the
builder functions from pass_search.core.query_builder.
"""
