"""damt: look up acronyms stored in a SQLite database."""
