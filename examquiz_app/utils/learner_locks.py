"""
Per-learner mutual exclusion.

Streak and mastery updates are read-modify-write sequences over one learner's
rows. Running them under the learner's lock serializes that learner's actions
within this process; different learners never wait on each other.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class LearnerLockRegistry:
    """Hands out one lock per learner id."""

    _instance = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._locks: Dict[int, threading.Lock] = {}
        self._guard = threading.Lock()

    @classmethod
    def get_registry(cls) -> 'LearnerLockRegistry':
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def lock_for(self, learner_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(learner_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[learner_id] = lock
            return lock


@contextmanager
def learner_lock(learner_id: int) -> Iterator[None]:
    """Hold the lock of ``learner_id`` for the duration of the block."""
    lock = LearnerLockRegistry.get_registry().lock_for(learner_id)
    with lock:
        yield
