"""Static content tables and the catalog the engine queries them through.

Universities, courses, actions, random events, resume reward pools, mentor
name pools, majors, backgrounds, interview questions and shop items are all
pure data here. Nothing in this package makes a decision.
"""

from .catalog import DEFAULT_CATALOG, ContentCatalog

__all__ = [
    "ContentCatalog",
    "DEFAULT_CATALOG",
]
