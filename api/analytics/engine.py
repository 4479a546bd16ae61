"""
Completion analytics over a point-in-time snapshot of users, releases and tasks.

Everything here is pure and synchronous: no I/O, no caching between calls.
The snapshot may still contain soft-deleted rows; `is_active` is the single
predicate applied at each traversal boundary (user, release, task).

Two averaging strategies are in play and they are not interchangeable:
- flat rate: done / total over a pooled set of tasks
  (`overall_completion_percentage`, and each individual entity's rate)
- equal-weight average: mean of per-entity rates, where an entity with one
  task weighs the same as one with a thousand, and an entity with no tasks
  contributes a 0 (`average_completion_percentage_per_user`,
  `average_completion_percentage_per_release`)

Percentages are returned unrounded in [0, 100]. Empty denominators give 0.0.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

from core.enums import TaskStatus


class SnapshotIntegrityError(RuntimeError):
    pass


class OverallScope(str, Enum):
    """
    Which tasks feed `overall_completion_percentage`.

    ALL_ACTIVE_TASKS counts every non-deleted task, even when its release is
    deleted. The per-user query does filter deleted releases, so the two
    numbers can disagree; this is the long-standing behavior and the default.

    ACTIVE_RELEASES also drops tasks whose release is deleted, which makes the
    overall figure traverse the hierarchy the same way the per-user one does.
    """

    ALL_ACTIVE_TASKS = "all_active_tasks"
    ACTIVE_RELEASES = "active_releases"


class _SoftDeletable(Protocol):
    deleted: bool


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str = ""
    deleted: bool = False


@dataclass(frozen=True)
class ReleaseRecord:
    id: int
    user_id: int
    title: str = ""
    deleted: bool = False


@dataclass(frozen=True)
class TaskRecord:
    id: int
    release_id: int
    status: TaskStatus = TaskStatus.TODO
    deleted: bool = False


@dataclass(frozen=True)
class Snapshot:
    users: tuple[UserRecord, ...] = field(default_factory=tuple)
    releases: tuple[ReleaseRecord, ...] = field(default_factory=tuple)
    tasks: tuple[TaskRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the snapshot stays immutable.
        object.__setattr__(self, "users", tuple(self.users))
        object.__setattr__(self, "releases", tuple(self.releases))
        object.__setattr__(self, "tasks", tuple(self.tasks))


@dataclass(frozen=True)
class CompletionCounts:
    total: int = 0
    completed: int = 0

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total * 100


@dataclass(frozen=True)
class CompletionSummary:
    overall_completion_percentage: float
    average_completion_percentage_per_user: float
    average_completion_percentage_per_release: float


def is_active(entity: _SoftDeletable) -> bool:
    return not entity.deleted


def is_completed(task: TaskRecord) -> bool:
    return task.status == TaskStatus.DONE


def count_completion(tasks: Iterable[TaskRecord]) -> CompletionCounts:
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if is_completed(task):
            completed += 1
    return CompletionCounts(total=total, completed=completed)


def _mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def _active_tasks_by_release(snapshot: Snapshot) -> dict[int, list[TaskRecord]]:
    grouped: dict[int, list[TaskRecord]] = defaultdict(list)
    for task in snapshot.tasks:
        if is_active(task):
            grouped[task.release_id].append(task)
    return grouped


def _active_releases_by_user(snapshot: Snapshot) -> dict[int, list[ReleaseRecord]]:
    grouped: dict[int, list[ReleaseRecord]] = defaultdict(list)
    for release in snapshot.releases:
        if is_active(release):
            grouped[release.user_id].append(release)
    return grouped


def validate_snapshot(snapshot: Snapshot) -> None:
    """
    Raise SnapshotIntegrityError when a row points at a parent that is not in
    the snapshot. Deleted parents are fine; missing ones are not.
    """
    user_ids = {user.id for user in snapshot.users}
    release_ids = {release.id for release in snapshot.releases}

    for release in snapshot.releases:
        if release.user_id not in user_ids:
            raise SnapshotIntegrityError(
                f"Release {release.id} references unknown user {release.user_id}."
            )
    for task in snapshot.tasks:
        if task.release_id not in release_ids:
            raise SnapshotIntegrityError(
                f"Task {task.id} references unknown release {task.release_id}."
            )


def overall_completion_percentage(
    snapshot: Snapshot,
    *,
    scope: OverallScope = OverallScope.ALL_ACTIVE_TASKS,
) -> float:
    """
    Flat completion rate over every eligible task in the system.
    """
    tasks: Iterable[TaskRecord] = (t for t in snapshot.tasks if is_active(t))
    if scope == OverallScope.ACTIVE_RELEASES:
        active_release_ids = {r.id for r in snapshot.releases if is_active(r)}
        tasks = (t for t in tasks if t.release_id in active_release_ids)
    return count_completion(tasks).percentage


def completion_percentage_per_user(snapshot: Snapshot) -> dict[int, float]:
    """
    Completion rate per active user, over tasks reached through that user's
    active releases. Users without eligible tasks map to 0.0.
    """
    tasks_by_release = _active_tasks_by_release(snapshot)
    releases_by_user = _active_releases_by_user(snapshot)

    rates: dict[int, float] = {}
    for user in snapshot.users:
        if not is_active(user):
            continue
        user_tasks = (
            task
            for release in releases_by_user.get(user.id, [])
            for task in tasks_by_release.get(release.id, [])
        )
        rates[user.id] = count_completion(user_tasks).percentage
    return rates


def average_completion_percentage_per_user(snapshot: Snapshot) -> float:
    """
    Equal-weight mean of per-user rates (not a pooled, task-weighted rate).
    """
    return _mean(completion_percentage_per_user(snapshot).values())


def task_counts_per_release(snapshot: Snapshot) -> dict[int, CompletionCounts]:
    """
    Active task totals per active release. The owner's deleted flag is not
    consulted here.
    """
    tasks_by_release = _active_tasks_by_release(snapshot)
    return {
        release.id: count_completion(tasks_by_release.get(release.id, []))
        for release in snapshot.releases
        if is_active(release)
    }


def completion_percentage_per_release(snapshot: Snapshot) -> dict[int, float]:
    """
    Completion rate per active release. Releases without tasks map to 0.0.
    """
    return {release_id: counts.percentage for release_id, counts in task_counts_per_release(snapshot).items()}


def average_completion_percentage_per_release(snapshot: Snapshot) -> float:
    """
    Equal-weight mean of per-release rates (not a pooled, task-weighted rate).
    """
    return _mean(completion_percentage_per_release(snapshot).values())


def completion_summary(
    snapshot: Snapshot,
    *,
    scope: OverallScope = OverallScope.ALL_ACTIVE_TASKS,
) -> CompletionSummary:
    return CompletionSummary(
        overall_completion_percentage=overall_completion_percentage(snapshot, scope=scope),
        average_completion_percentage_per_user=average_completion_percentage_per_user(snapshot),
        average_completion_percentage_per_release=average_completion_percentage_per_release(snapshot),
    )
