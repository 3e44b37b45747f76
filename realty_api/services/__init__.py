"""
High-level use cases for the realty site API.

Startup orchestration (picking the storage backend, seeding example
records) lives here so that routers only ever see a ready RecordStore.
"""
