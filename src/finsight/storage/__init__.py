"""Flat-file storage layer for finsight."""

from finsight.storage.base import RecordCodec, RecordStore
from finsight.storage.factories import RecordStores, create_record_stores

__all__ = ["RecordCodec", "RecordStore", "RecordStores", "create_record_stores"]
