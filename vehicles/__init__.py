"""
vehicles — per-user vehicle records.

Every read and write is filtered by the owner's email; a vehicle that
belongs to someone else looks exactly like one that does not exist.
"""
