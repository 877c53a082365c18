"""
Durable, process-wide string settings stored in the database.

Values are plain strings addressed by a unique key. Reads are served from the
Django cache and every write invalidates the cached value, so a write is seen
by all later reads regardless of which process made it.
"""
