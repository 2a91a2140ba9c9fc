"""
db/ - Database Layer
====================
PostgreSQL connection pool and schema bootstrap.
Lowest layer of the bot; it depends only on config and logging.
"""
