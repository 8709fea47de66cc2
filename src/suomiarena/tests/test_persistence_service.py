"""Tests for progress persistence."""
from typing import List

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from suomiarena.models.session_models import (
    GameMode,
    PlayerProgress,
    TimeRecord,
    TopicProgress,
    same_progress,
)
from suomiarena.services.persistence_service import (
    LocalProgressStore,
    PersistenceService,
    RemoteProgressMirror,
)
from suomiarena.services.progress_codec import progress_to_csv

BASE_URL = "http://testserver/api"


class FakeDataServer:
    """In-memory stand-in for the data server, served through httpx.MockTransport."""

    def __init__(self, fail: bool = False):
        self.csv: str = ""
        self.fail = fail
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.path == "/api/health":
            return httpx.Response(200, json={"status": "ok"})
        if request.method == "GET":
            if not self.csv:
                return httpx.Response(404, json={"message": "No data file found"})
            return httpx.Response(200, text=self.csv, headers={"Content-Type": "text/csv"})
        self.csv = request.content.decode("utf-8")
        return httpx.Response(200, json={"success": True})


@pytest.fixture
def local_store(session_factory) -> LocalProgressStore:
    return LocalProgressStore(session_factory=session_factory, key="test-progress")


def make_mirror(server: FakeDataServer) -> RemoteProgressMirror:
    return RemoteProgressMirror(
        base_url=BASE_URL,
        client=httpx.AsyncClient(transport=httpx.MockTransport(server)),
    )


@pytest.fixture
def progress() -> PlayerProgress:
    return PlayerProgress(
        best_times=(TimeRecord(GameMode.GENITIVE, "e-ending", 33_000, "2024-05-02", 100, 2),),
        topic_progress=(TopicProgress(GameMode.VERB_TYPE_NEGATIVE, "2", True, "2024-05-02"),),
    )


def test_local_store_read_write_remove(local_store: LocalProgressStore):
    """Test the key/value device storage."""
    assert local_store.read() is None
    local_store.write("one")
    local_store.write("two")
    assert local_store.read() == "two"
    assert local_store.remove()
    assert local_store.read() is None
    assert not local_store.remove()


@pytest.mark.asyncio
async def test_save_twice_then_load(local_store, progress):
    """Test that the last saved progress is what loads."""
    server = FakeDataServer()
    service = PersistenceService(local=local_store, remote=make_mirror(server))

    await service.save(PlayerProgress())
    await service.save(progress)
    loaded = await service.load()

    assert same_progress(loaded, progress)
    assert server.csv == progress_to_csv(progress)
    assert [r.method for r in server.requests] == ["POST", "POST", "GET"]
    await service.close()


@pytest.mark.asyncio
async def test_save_survives_remote_failure(local_store, progress):
    """Test that network errors are swallowed and local data still loads."""
    server = FakeDataServer(fail=True)
    service = PersistenceService(local=local_store, remote=make_mirror(server))

    await service.save(progress)
    loaded = await service.load()

    assert loaded == progress
    assert len(server.requests) == 2
    await service.close()


@pytest.mark.asyncio
async def test_load_merges_remote_into_local(local_store, progress):
    """Test that remote records missing locally are added to the local copy."""
    server = FakeDataServer()
    server.csv = progress_to_csv(progress)
    service = PersistenceService(local=local_store, remote=make_mirror(server))
    service.save_local(PlayerProgress())

    loaded = await service.load()

    assert same_progress(loaded, progress)
    assert same_progress(service.load_local(), progress)
    await service.close()


@pytest.mark.asyncio
async def test_stale_remote_keeps_local_times(local_store):
    """Test that a slower remote time never replaces a faster local one."""
    local = PlayerProgress(
        best_times=(TimeRecord(GameMode.PLURAL, "old-i", 90_000, "2024-05-03", 100, 2),),
    )
    stale = PlayerProgress(
        best_times=(TimeRecord(GameMode.PLURAL, "old-i", 120_000, "2024-05-01", 100, 2),),
        topic_progress=(TopicProgress(GameMode.VOCABULARY_RECALL, "1a", True, "2024-05-01"),),
    )
    server = FakeDataServer()
    server.csv = progress_to_csv(stale)
    service = PersistenceService(local=local_store, remote=make_mirror(server))
    service.save_local(local)

    loaded = await service.load()

    assert loaded.best_time_for(GameMode.PLURAL, "old-i").time_ms == 90_000
    assert loaded.is_topic_completed(GameMode.VOCABULARY_RECALL, "1a")
    assert service.load_local() == loaded
    await service.close()


@pytest.mark.asyncio
async def test_remote_without_changes_leaves_local_alone(local_store, progress):
    """Test that an older copy of the same data does not rewrite local storage."""
    server = FakeDataServer()
    server.csv = progress_to_csv(PlayerProgress(best_times=progress.best_times))
    service = PersistenceService(local=local_store, remote=make_mirror(server))
    service.save_local(progress)

    assert await service.load() == progress
    assert service.load_local() == progress
    await service.close()


@pytest.mark.asyncio
async def test_header_only_remote_keeps_local(local_store, progress):
    """Test that an empty remote document does not wipe local progress."""
    server = FakeDataServer()
    server.csv = progress_to_csv(PlayerProgress())
    service = PersistenceService(local=local_store, remote=make_mirror(server))
    service.save_local(progress)

    assert await service.load() == progress
    assert service.load_local() == progress
    await service.close()


@pytest.mark.asyncio
async def test_load_falls_back_to_local(local_store, progress):
    """Test local fallback when the server has nothing or garbage."""
    server = FakeDataServer()
    service = PersistenceService(local=local_store, remote=make_mirror(server))
    service.save_local(progress)

    assert await service.load() == progress

    server.csv = "this is not,the expected header\n"
    assert await service.load() == progress
    await service.close()


@pytest.mark.asyncio
async def test_load_nothing_saved(local_store):
    """Test that a fresh install loads nothing."""
    service = PersistenceService(local=local_store, remote=make_mirror(FakeDataServer()))
    assert await service.load() is None
    await service.close()


@pytest.mark.asyncio
async def test_local_only(local_store, progress):
    """Test persistence with the remote mirror disabled."""
    service = PersistenceService(local=local_store, remote_enabled=False)
    assert service.remote is None

    await service.save(progress)
    assert await service.load() == progress

    service.reset()
    assert await service.load() is None
    await service.close()


@pytest.mark.asyncio
async def test_remote_health():
    """Test the health check against up and down servers."""
    up = make_mirror(FakeDataServer())
    down = make_mirror(FakeDataServer(fail=True))
    assert await up.health()
    assert not await down.health()
    await up.close()
    await down.close()


def test_local_write_failure_is_not_fatal(progress):
    """Test that storage errors are logged, not raised."""
    engine = create_engine("sqlite://")  # no tables created
    store = LocalProgressStore(session_factory=sessionmaker(bind=engine), key="missing-table")
    service = PersistenceService(local=store, remote_enabled=False)

    assert not service.save_local(progress)
    assert service.load_local() is None
    service.reset()
