from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import bson
from bson import ObjectId
from bson.codec_options import CodecOptions
import pytest

from src.club_attendance.club_attendance.container import build_container


# Same settings the real client uses (MongoClient(tz_aware=True)).
_CODEC = CodecOptions(tz_aware=True)


def _through_bson(doc: dict) -> dict:
    """What the server would hand back: millisecond dates, UTC tzinfo."""
    return bson.decode(bson.encode(doc), codec_options=_CODEC)


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self._docs = docs

    def sort(self, keys):
        # Apply the least significant key first; list.sort is stable.
        for key, direction in reversed(keys):
            self._docs.sort(key=lambda d: d[key], reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    """Just enough of pymongo's Collection for the repositories."""

    def __init__(self):
        self.docs: list[dict] = []
        self.indexes: list = []

    @staticmethod
    def _matches(doc: dict, filt: dict) -> bool:
        for key, expected in (filt or {}).items():
            if isinstance(expected, dict) and "$in" in expected:
                if doc.get(key) not in expected["$in"]:
                    return False
            elif doc.get(key) != expected:
                return False
        return True

    def find(self, filt=None, projection=None):
        return FakeCursor([dict(d) for d in self.docs if self._matches(d, filt)])

    def find_one(self, filt=None, projection=None, sort=None):
        cursor = self.find(filt)
        if sort:
            cursor.sort(sort)
        return next(iter(cursor), None)

    def insert_one(self, doc):
        stored = dict(doc)
        stored.setdefault("_id", ObjectId())
        stored = _through_bson(stored)
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def update_one(self, filt, update):
        for doc in self.docs:
            if self._matches(doc, filt):
                doc.update(_through_bson(update["$set"]))
                return SimpleNamespace(matched_count=1)
        return SimpleNamespace(matched_count=0)

    def find_one_and_delete(self, filt):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, filt):
                return self.docs.pop(i)
        return None

    def create_index(self, keys, **kwargs):
        self.indexes.append(keys)
        return "_".join(k for k, _ in keys)


class FakeMongoConnection:
    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_mongo():
    return FakeMongoConnection()


@pytest.fixture
def file_container(tmp_path):
    return build_container(storage_config={"backend": "file", "data_dir": str(tmp_path)})


@pytest.fixture
def mongo_container(fake_mongo):
    return build_container(storage_config={"backend": "mongo"}, mongo=fake_mongo)


@pytest.fixture(params=["file", "mongo"])
def container(request, tmp_path, fake_mongo):
    """The same store contract, once per backend."""
    if request.param == "file":
        return build_container(storage_config={"backend": "file", "data_dir": str(tmp_path)})
    return build_container(storage_config={"backend": "mongo"}, mongo=fake_mongo)
