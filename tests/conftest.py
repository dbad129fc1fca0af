import logging

import pytest

from gctx.exceptions import StoreError, UnknownProfile
from gctx.logger import get_logger
from gctx.storage.context_storage import PreviousContextStorage
from gctx.storage.profile_store import ProfileStore


class FakeProfileStore(ProfileStore):
    """In-memory profile store: records map profile name -> settings text"""

    def __init__(self, profiles=None, active=None):
        self.records = dict(profiles or {})
        self.active = active
        self.calls = []

    def list_profiles(self):
        return list(self.records)

    def active_profile(self):
        if self.active is None:
            raise StoreError("no active configuration")
        return self.active

    def activate(self, name):
        self.calls.append(("activate", name))
        if name not in self.records:
            raise UnknownProfile(name)
        self.active = name

    def delete(self, name):
        self.calls.append(("delete", name))
        if name not in self.records:
            raise UnknownProfile(name)
        del self.records[name]
        if self.active == name:
            self.active = None

    def has_record(self, name):
        return name in self.records

    def remove_record(self, name):
        self.calls.append(("remove_record", name))
        self.records.pop(name, None)

    def move_record(self, old, new):
        self.calls.append(("move_record", old, new))
        if old not in self.records:
            raise UnknownProfile(old)
        self.records[new] = self.records.pop(old)


@pytest.fixture
def store():
    """Store with dev (active) and staging"""
    return FakeProfileStore({"dev": "project = dev-123", "staging": "project = stg-456"}, active="dev")


@pytest.fixture
def tracker(tmp_path):
    """Previous-profile record in an isolated directory"""
    return PreviousContextStorage(tmp_path / "gctx" / "previous")


@pytest.fixture
def make_store():
    """Factory for stores with custom profiles"""
    return FakeProfileStore


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a CliRunner's streams once the test is over"""
    yield
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
