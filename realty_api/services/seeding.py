"""Idempotent population of the project and client collections."""

from __future__ import annotations

import logging

from realty_api.domain.records import CLIENT, PROJECT
from realty_api.repositories.base import RecordStore
from realty_api.repositories.memory_repository import InMemoryRepository

from .seed_data import FALLBACK_CLIENTS, FALLBACK_PROJECTS, SEED_CLIENTS, SEED_PROJECTS

logger = logging.getLogger(__name__)

SEEDS = {
    PROJECT: SEED_PROJECTS,
    CLIENT: SEED_CLIENTS,
}


def seed_collections(store: RecordStore) -> dict[str, int]:
    """
    Insert the example records into every seeded collection that is empty.

    Returns how many records were inserted per entity; a collection that
    already holds at least one record is left alone (0).
    """
    inserted: dict[str, int] = {}
    for entity, records in SEEDS.items():
        if store.count(entity) > 0:
            inserted[entity] = 0
            continue
        # newest-first listing should match the order written in seed_data
        for record in reversed(records):
            store.create(entity, record)
        inserted[entity] = len(records)
        logger.info("Seeded %d %s records", len(records), entity)
    return inserted


def fallback_store() -> InMemoryRepository:
    return InMemoryRepository(initial={PROJECT: FALLBACK_PROJECTS, CLIENT: FALLBACK_CLIENTS})
