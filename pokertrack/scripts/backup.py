"""
PokerTrack – Session Backup
=============================
Exports every stored session to a timestamped JSON file.

USAGE:
    python -m pokertrack.scripts.backup
    python -m pokertrack.scripts.backup --out-dir /var/backups/pokertrack

OUTPUT:
    <out-dir>/sessions-backup-2024-03-01T18-30-05-123Z.json

    A JSON array of sessions in the wire shape served by the API,
    newest first. The store is read through the same repository the
    API uses, so DB_ENABLED and the DB_* settings apply here too.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pokertrack.container import Container
from pokertrack.domain.repositories.session_repository import ISessionRepository
from pokertrack.shared.config.settings import Settings, settings as default_settings
from pokertrack.shared.logging.logger import get_logger, setup_logging

logger = get_logger("scripts.backup")

DEFAULT_BACKUP_DIR = Path("backups")


def backup_filename(now: datetime) -> str:
    """sessions-backup-<UTC ISO timestamp>.json with ':' and '.' made file-safe."""
    stamp = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    stamp += f".{now.microsecond // 1000:03d}Z"
    return f"sessions-backup-{stamp.replace(':', '-').replace('.', '-')}.json"


async def export_sessions(
    repository: ISessionRepository,
    out_dir: Path,
    now: Optional[datetime] = None,
) -> Path:
    """
    Write every session in the store to a new backup file.

    Args:
        repository: Session store to read from.
        out_dir: Target directory, created if missing.
        now: Timestamp for the file name (defaults to the current UTC time).

    Returns:
        Path of the written file.
    """
    sessions = await repository.find_all()
    logger.info("Found %d sessions", len(sessions))

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / backup_filename(now or datetime.now(timezone.utc))
    payload = [session.to_dict() for session in sessions]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info("Backup saved to %s | sessions=%d", path, len(sessions))
    return path


async def run_backup(settings: Settings, out_dir: Path) -> Path:
    """Open the configured store, export it and release the connection pool."""
    container = Container(settings=settings)
    if not settings.db_enabled:
        logger.warning("DB_ENABLED is false: backing up the empty in-memory store")
        return await export_sessions(container.session_repository, out_dir)

    await container.db_manager.initialize()
    try:
        return await export_sessions(container.session_repository, out_dir)
    finally:
        await container.db_manager.close()


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="PokerTrack session backup"
    )
    parser.add_argument(
        "--out-dir", type=Path, default=DEFAULT_BACKUP_DIR,
        help="Directory for the backup file (default: ./backups)"
    )
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if default_settings.debug else logging.INFO)

    try:
        asyncio.run(run_backup(default_settings, args.out_dir))
    except Exception:
        logger.exception("Backup failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
