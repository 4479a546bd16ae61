"""
Demo data seeding.

Runs on startup when SEED_DEMO_DATA is enabled. Every step checks what is
already there, so running it again is harmless:
- task templates (the master promotion checklist) are inserted once
- demo users are inserted if their names are missing
- every user without releases gets 1-3 releases, each with one ToDo task per
  template, due 1-30 days after the release date
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone

from core.enums import ReleaseType, TaskPriority, TaskStatus
from releases import repository as release_repository
from tasks import repository as task_repository
from users import repository as user_repository

from . import repository

logger = logging.getLogger(__name__)

DEMO_USERS = ["Ian Conner", "Test McApp"]

TEMPLATE_TASKS: list[tuple[str, str, TaskPriority]] = [
    ("Social Media Announcement", "Create and post announcement across all social media platforms", TaskPriority.HIGH),
    ("Playlist Pitching", "Research and pitch to relevant Spotify and Apple Music playlists", TaskPriority.HIGH),
    ("Fan Email Campaign", "Send release announcement to fan mailing list", TaskPriority.MEDIUM),
    ("Press Release", "Write and distribute press release to music blogs and media", TaskPriority.MEDIUM),
    ("Music Video", "Plan and create music video for the release", TaskPriority.HIGH),
    ("Radio Promotion", "Submit to radio stations and online radio shows", TaskPriority.MEDIUM),
    ("Merchandise", "Design and order merchandise for the release", TaskPriority.LOW),
    ("Live Performance", "Plan and schedule release party or live performance", TaskPriority.MEDIUM),
    ("Collaboration Outreach", "Reach out to other artists for potential collaborations", TaskPriority.LOW),
    ("Content Creation", "Create behind-the-scenes content and teasers", TaskPriority.MEDIUM),
]

RELEASE_TITLES = [
    "Midnight Echoes",
    "Neon Skyline",
    "Paper Moons",
    "Static Bloom",
    "Golden Hour Tapes",
    "Low Tide",
    "City of Glass",
    "Afterglow",
]

RELEASE_DESCRIPTIONS = [
    "A collection of late-night recordings.",
    "Upbeat tracks made for summer drives.",
    "Stripped-back acoustic versions of fan favourites.",
    "Experimental sounds from the studio vault.",
]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def seed_task_templates() -> int:
    if await repository.count_templates() > 0:
        return 0

    await repository.insert_templates(
        [(title, description, priority.value) for (title, description, priority) in TEMPLATE_TASKS]
    )
    logger.info("seeded_task_templates count=%s", len(TEMPLATE_TASKS))
    return len(TEMPLATE_TASKS)


async def seed_users() -> int:
    existing = await user_repository.list_user_names()
    new_names = [name for name in DEMO_USERS if name not in existing]
    if not new_names:
        logger.info("seeded_users count=0 reason=all_present")
        return 0
    await user_repository.insert_users(new_names)
    logger.info("seeded_users count=%s", len(new_names))
    return len(new_names)


def build_releases(user_id: int, rng: random.Random, *, now: datetime) -> list[dict]:
    releases = []
    for i in range(rng.randint(1, 3)):
        releases.append(
            {
                "user_id": user_id,
                "title": f"{rng.choice(RELEASE_TITLES)} {i + 1}",
                "release_type": rng.choice(list(ReleaseType)).value,
                "release_date": now + timedelta(days=rng.randint(1, 364)),
                "description": rng.choice(RELEASE_DESCRIPTIONS),
            }
        )
    return releases


def build_tasks(
    release_id: int,
    release_date: datetime,
    templates: list[dict],
    rng: random.Random,
) -> list[tuple[int, str, str, str, datetime | None]]:
    return [
        (
            release_id,
            TaskStatus.TODO.value,
            str(template["priority"]),
            str(template["description"]),
            release_date + timedelta(days=rng.randint(1, 29)),
        )
        for template in templates
    ]


async def seed_releases(rng: random.Random | None = None) -> int:
    rng = rng or random.Random()
    templates = await repository.list_active_templates()

    created = 0
    now = _utc_now()
    for user_id in await release_repository.user_ids_without_releases():
        for release in build_releases(user_id, rng, now=now):
            row = await release_repository.create_release(**release)
            await task_repository.insert_tasks(
                build_tasks(int(row["id"]), row["release_date"], templates, rng)
            )
            created += 1
    logger.info("seeded_releases count=%s", created)
    return created


async def seed_demo_data() -> None:
    try:
        await seed_task_templates()
        await seed_users()
        await seed_releases()
    except Exception:
        logger.exception("seeding_failed")
        raise
