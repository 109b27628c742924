"""migrant - versioned SQL and Python schema migrations for SQLite."""

__version__ = "0.1.0"
