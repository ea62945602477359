"""Locks and condition variables shared by the game's threads."""

from __future__ import annotations

import threading


class SyncPrimitives:
    """Every lock the game uses, plus the bridge and depot occupancy."""

    def __init__(self) -> None:
        self.helicopter_lock = threading.Lock()
        self.rockets_lock = threading.Lock()
        self.soldiers_lock = threading.Lock()
        self.battery_locks = (threading.Lock(), threading.Lock())
        self.bridge = threading.Condition(threading.Lock())
        self.depot = threading.Condition(threading.Lock())
        self.bridge_occupied = False
        self.depot_occupied = False

    def battery_lock(self, battery_id: int) -> threading.Lock:
        """Return the lock guarding the battery with the given id."""
        if battery_id not in (0, 1):
            raise ValueError(f"no battery with id {battery_id}")
        return self.battery_locks[battery_id]

    def occupy_bridge(self) -> bool:
        """Block until the bridge is free, then take it.

        Returns True if the caller had to wait.
        """
        with self.bridge:
            waited = False
            while self.bridge_occupied:
                waited = True
                self.bridge.wait()
            self.bridge_occupied = True
            return waited

    def release_bridge(self) -> None:
        """Free the bridge and wake one waiter."""
        with self.bridge:
            self.bridge_occupied = False
            self.bridge.notify()

    def occupy_depot(self) -> bool:
        """Block until the depot is free, then take it.

        Returns True if the caller had to wait.
        """
        with self.depot:
            waited = False
            while self.depot_occupied:
                waited = True
                self.depot.wait()
            self.depot_occupied = True
            return waited

    def release_depot(self) -> None:
        """Free the depot and wake one waiter."""
        with self.depot:
            self.depot_occupied = False
            self.depot.notify()