from marketroute.adapters.sqlite.redirects import SQLiteRedirectStore

__all__ = ["SQLiteRedirectStore"]
