"""Persistence of player progress: local storage plus a remote CSV mirror."""
import logging
from typing import Callable, Optional

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from suomiarena.config import settings
from suomiarena.models.base import SessionLocal
from suomiarena.models.models import StorageEntry
from suomiarena.models.session_models import PlayerProgress, merge_progress, same_progress
from suomiarena.monitoring import persistence_errors
from suomiarena.services.progress_codec import (
    csv_to_progress,
    json_to_progress,
    progress_to_csv,
    progress_to_json,
)

logger = logging.getLogger(__name__)


class LocalProgressStore:
    """Key/value device storage backed by the storage_entries table."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, key: Optional[str] = None):
        self.session_factory = session_factory
        self.key = key or settings.persistence.storage_key

    def read(self) -> Optional[str]:
        """Return the stored blob, or None when nothing is stored."""
        db = self.session_factory()
        try:
            entry = db.get(StorageEntry, self.key)
            return entry.value if entry else None
        finally:
            db.close()

    def write(self, value: str) -> None:
        """Store a blob under the configured key, replacing any previous one."""
        db = self.session_factory()
        try:
            entry = db.get(StorageEntry, self.key)
            if entry is None:
                db.add(StorageEntry(key=self.key, value=value))
            else:
                entry.value = value
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()

    def remove(self) -> bool:
        """Delete the stored blob. Returns False when there was none."""
        db = self.session_factory()
        try:
            deleted = db.query(StorageEntry).filter(StorageEntry.key == self.key).delete()
            db.commit()
            return bool(deleted)
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()


class RemoteProgressMirror:
    """Async client for the companion data server."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.persistence.api_base_url).rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=timeout or settings.persistence.timeout,
        )

    async def fetch(self) -> Optional[str]:
        """Download the CSV document; None when the server has no data yet."""
        response = await self.client.get(f"{self.base_url}/data")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.text

    async def push(self, csv_text: str) -> None:
        """Upload the CSV document."""
        response = await self.client.post(
            f"{self.base_url}/data",
            content=csv_text.encode("utf-8"),
            headers={"Content-Type": "text/csv"},
        )
        response.raise_for_status()

    async def health(self) -> bool:
        """Check whether the data server is reachable."""
        try:
            response = await self.client.get(f"{self.base_url}/health")
        except httpx.HTTPError as e:
            logger.debug(f"Data server health check failed: {e}")
            return False
        return response.status_code == 200

    async def close(self) -> None:
        await self.client.aclose()


class PersistenceService:
    """Service for saving and loading player progress.

    Local storage is the authoritative copy; the remote mirror is best effort.
    """

    def __init__(
        self,
        local: Optional[LocalProgressStore] = None,
        remote: Optional[RemoteProgressMirror] = None,
        remote_enabled: Optional[bool] = None,
    ):
        self.local = local or LocalProgressStore()
        if remote_enabled is None:
            remote_enabled = settings.persistence.remote_enabled
        self.remote = remote if remote is not None else (RemoteProgressMirror() if remote_enabled else None)

    def save_local(self, progress: PlayerProgress) -> bool:
        """Write progress to local storage. Returns False on failure."""
        try:
            self.local.write(progress_to_json(progress))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Failed to save progress locally: {e}")
            persistence_errors.labels(target="local", operation="save").inc()
            return False

    async def save(self, progress: PlayerProgress) -> None:
        """Save progress locally, then push it to the remote mirror."""
        self.save_local(progress)
        await self.push_remote(progress)

    async def push_remote(self, progress: PlayerProgress) -> None:
        """Upload progress to the remote mirror, if one is configured."""
        if self.remote is None:
            return
        try:
            await self.remote.push(progress_to_csv(progress))
            logger.debug(f"Pushed progress to {self.remote.base_url}")
        except httpx.HTTPError as e:
            logger.warning(f"Failed to push progress to data server: {e}")
            persistence_errors.labels(target="remote", operation="save").inc()

    def load_local(self) -> Optional[PlayerProgress]:
        """Read progress from local storage; None when missing or unreadable."""
        try:
            return json_to_progress(self.local.read())
        except SQLAlchemyError as e:
            logger.error(f"Failed to load local progress: {e}")
            persistence_errors.labels(target="local", operation="load").inc()
            return None

    async def load(self) -> Optional[PlayerProgress]:
        """Load progress, combining the remote mirror with local storage.

        Remote data is merged into the local copy, never written over it:
        the faster time wins per topic and completion flags are kept.
        """
        if self.remote is not None:
            try:
                text = await self.remote.fetch()
                remote_progress = csv_to_progress(text) if text else None
                if remote_progress is not None:
                    logger.info("Loaded progress from data server")
                    return self._merge_into_local(remote_progress)
            except httpx.HTTPError as e:
                logger.warning(f"Failed to load progress from data server: {e}")
                persistence_errors.labels(target="remote", operation="load").inc()

        progress = self.load_local()
        if progress is not None:
            logger.info("Loaded progress from local storage")
        return progress

    def _merge_into_local(self, remote_progress: PlayerProgress) -> PlayerProgress:
        local_progress = self.load_local()
        if local_progress is None:
            merged = remote_progress
        else:
            merged = merge_progress(local_progress, remote_progress)
            if same_progress(merged, local_progress):
                return local_progress
        self.save_local(merged)
        logger.info("Local progress updated from data server")
        return merged

    def reset(self) -> None:
        """Forget locally stored progress."""
        try:
            if self.local.remove():
                logger.info("Local progress removed")
        except SQLAlchemyError as e:
            logger.error(f"Failed to remove local progress: {e}")
            persistence_errors.labels(target="local", operation="reset").inc()

    async def close(self) -> None:
        if self.remote is not None:
            await self.remote.close()
