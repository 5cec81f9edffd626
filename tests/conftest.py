"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from application.policies.admin_access_policy import AdminAccessPolicy
from application.services.artifact_reclaimer import ArtifactDirectories, ArtifactReclaimer
from application.services.orphan_collector import OrphanActorCollector
from application.use_cases.title_use_cases import DeleteTitleUseCase
from domain.value_objects.identity import Identity
from domain.value_objects.user_role import UserRole
from tests.mocks import (
    InMemoryCatalog,
    MockActorRepository,
    MockLifecycleLogger,
    MockMediaStore,
    MockSessionResolver,
    MockTitleRepository,
)


@pytest.fixture
def admin_identity() -> Identity:
    """Return the identity of an administrator."""
    return Identity(user_id="user-1", email="admin@example.com")


@pytest.fixture
def admin_session(admin_identity: Identity) -> MockSessionResolver:
    """Session of an authenticated administrator."""
    return MockSessionResolver(identity=admin_identity, role=UserRole.ADMIN.value)


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog()


@pytest.fixture
def media_store(catalog: InMemoryCatalog) -> MockMediaStore:
    """Empty media store sharing the catalog's call log."""
    return MockMediaStore(calls=catalog.calls)


@pytest.fixture
def lifecycle_logger() -> MockLifecycleLogger:
    return MockLifecycleLogger()


@pytest.fixture
def directories() -> ArtifactDirectories:
    return ArtifactDirectories(movie_dir="./movies", series_dir="./series")


@pytest.fixture
def build_delete_title_use_case(
    catalog: InMemoryCatalog,
    media_store: MockMediaStore,
    lifecycle_logger: MockLifecycleLogger,
    admin_session: MockSessionResolver,
    directories: ArtifactDirectories,
):
    """Factory assembling DeleteTitleUseCase from the mocks; pieces can be overridden."""

    def _build(
        *,
        session: MockSessionResolver | None = None,
        title_repository: MockTitleRepository | None = None,
        actor_repository: MockActorRepository | None = None,
        store: MockMediaStore | None = None,
    ) -> DeleteTitleUseCase:
        return DeleteTitleUseCase(
            title_repository=title_repository or MockTitleRepository(catalog),
            access_policy=AdminAccessPolicy(session or admin_session, lifecycle_logger),
            artifact_reclaimer=ArtifactReclaimer(store or media_store, directories),
            orphan_collector=OrphanActorCollector(actor_repository or MockActorRepository(catalog)),
            lifecycle_logger=lifecycle_logger,
        )

    return _build
