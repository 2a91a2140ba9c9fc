"""
repositories/ - Data Access Layer
==================================
Each repository owns the SQL for one storage shape: the key/value table
holding the chat list, and the per-doctor registrations table.
Repositories log and re-raise failures; deciding what a failure means is
left to the services.
"""
