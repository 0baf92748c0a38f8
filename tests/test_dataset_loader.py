"""Tests for the fan-out dataset loader."""

from __future__ import annotations

import asyncio

import pytest

from app.services.executive.dataset_loader import (
    DATASET_FIELDS,
    CondominiumDataset,
    load_dataset,
    load_dataset_sync,
)
from app.storage import ENTITY_NAMES, DataFetchError, MemoryStorage
from tests.test_constants import OTHER_CONDOMINIUM_ID, TEST_CONDOMINIUM_ID


class FailingStorage(MemoryStorage):
    """Memory storage whose read of one entity type raises."""

    def __init__(self, failing_entity: str) -> None:
        super().__init__()
        self.failing_entity = failing_entity

    def list_rows(self, entity, condominium_id=None):
        if entity == self.failing_entity:
            raise ConnectionError("connection reset")
        return super().list_rows(entity, condominium_id)


def test_every_entity_maps_to_a_dataset_field() -> None:
    assert set(DATASET_FIELDS) == set(ENTITY_NAMES)
    assert set(DATASET_FIELDS.values()) == set(CondominiumDataset.__dataclass_fields__)


def test_load_dataset_collects_each_entity_for_tenant() -> None:
    storage = MemoryStorage()
    storage.add("contracts", {"condominium_id": TEST_CONDOMINIUM_ID})
    storage.add("insurance_policies", {"condominium_id": TEST_CONDOMINIUM_ID})
    storage.add("insurance_policies", {"condominium_id": OTHER_CONDOMINIUM_ID})

    dataset = asyncio.run(load_dataset(storage, TEST_CONDOMINIUM_ID))

    assert len(dataset.contracts) == 1
    assert len(dataset.insurance_policies) == 1
    assert dataset.transactions == []


def test_load_dataset_failure_aborts_with_entity_name() -> None:
    with pytest.raises(DataFetchError) as exc_info:
        asyncio.run(load_dataset(FailingStorage("budgets"), TEST_CONDOMINIUM_ID))
    assert exc_info.value.entity == "budgets"
    assert "connection reset" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_load_dataset_sync_matches_async() -> None:
    storage = MemoryStorage()
    storage.add("announcements", {"condominium_id": TEST_CONDOMINIUM_ID})
    assert load_dataset_sync(storage, TEST_CONDOMINIUM_ID) == asyncio.run(
        load_dataset(storage, TEST_CONDOMINIUM_ID)
    )


def test_load_dataset_sync_failure() -> None:
    with pytest.raises(DataFetchError, match="Failed to fetch documents"):
        load_dataset_sync(FailingStorage("documents"), None)
