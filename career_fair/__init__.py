"""
Career Fair Directory: read-only access to the bundled career fair database.

Packages:
- db: SQLite engine and query helpers
- directory: company records, filters, search and lookups
- utils: configuration, logging and path helpers
"""

__version__ = "1.1.0"

from . import utils
from . import db
from . import directory
