"""Switching, toggling, renaming and deleting profiles.

Every operation reads the active profile fresh from the store, mutates the
store, then updates the previous-profile record, in that order. Nothing is
cached between calls and nothing is rolled back: a failing store call stops
the operation before any later step runs.
"""

from typing import List

from gctx.exceptions import NameCollision, NoPreviousContext
from gctx.logger import get_logger
from gctx.models import ContextState
from gctx.storage.context_storage import PreviousContextStorage
from gctx.storage.profile_store import ProfileStore
from gctx.utils.utils import CURRENT, validate_profile_name

logger = get_logger("engine")


class ContextSwitcher:
    """Drives a ProfileStore and the previous-profile record together"""

    def __init__(self, store: ProfileStore, tracker: PreviousContextStorage):
        self.store = store
        self.tracker = tracker

    def state(self) -> ContextState:
        """Query the active profile and the recorded previous one"""
        return ContextState(active=self.store.active_profile(), previous=self.tracker.read())

    def list_profiles(self) -> List[str]:
        return self.store.list_profiles()

    def resolve(self, name: str) -> str:
        """Turn the "." shorthand into the active profile's name"""
        if name == CURRENT:
            return self.store.active_profile()
        return validate_profile_name(name)

    def switch(self, target: str) -> ContextState:
        """Activate target and remember the profile that was active before it.

        Switching to the profile that is already active leaves the record
        untouched, so the toggle target survives a redundant switch.
        """
        validate_profile_name(target)
        prev = self.store.active_profile()
        self.store.activate(target)
        if prev != target:
            self.tracker.save(prev)
            logger.info("switched %s -> %s", prev, target)
        else:
            logger.info("%s is already active", target)
        return ContextState(active=target, previous=self.tracker.read())

    def swap(self) -> ContextState:
        """Switch to the previous profile; calling it again switches back"""
        previous = self.tracker.read()
        if not previous:
            raise NoPreviousContext()
        return self.switch(previous)

    def rename(self, old_name: str, new_name: str, force: bool = False) -> ContextState:
        """Rename a profile's record and activate it under the new name.

        With force, an existing profile called new_name is removed first. That
        removal cannot be undone, and a crash between it and the move leaves
        new_name gone and old_name unrenamed.

        The previous-profile record is not rewritten, so it may still name
        old_name afterwards.
        """
        old_name = self.resolve(old_name)
        validate_profile_name(new_name)

        if old_name == new_name:
            self.store.activate(new_name)
            return self.state()

        if new_name in self.store.list_profiles():
            if not force:
                raise NameCollision(old_name, new_name)
            logger.info("overwriting existing profile %s", new_name)
            self.store.remove_record(new_name)
        self.store.move_record(old_name, new_name)
        self.store.activate(new_name)
        logger.info("renamed %s -> %s", old_name, new_name)
        return self.state()

    def delete(self, name: str) -> str:
        """Delete a profile's settings through the store and return the name deleted.

        A previous-profile record naming it is left dangling; toggling back to it
        later fails in the store.
        """
        name = self.resolve(name)
        self.store.delete(name)
        logger.info("deleted %s", name)
        return name
