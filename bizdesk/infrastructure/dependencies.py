"""Dependency wiring: builds the storage adapter, repositories and services."""

import logging
from dataclasses import dataclass

from bizdesk.application.interfaces import KeyValueStore
from bizdesk.application.services import (
    ClientService,
    ProjectService,
    ReportService,
    SettingsService,
    TaskService,
    TimesheetService,
    UserService,
)
from bizdesk.config import Settings, get_settings
from bizdesk.domain.entities import (
    Client,
    GeneralSettings,
    Project,
    Role,
    Task,
    Timesheet,
    User,
)
from bizdesk.infrastructure.database import SQLAlchemyKeyValueStore, create_engine
from bizdesk.infrastructure.records import (
    RecordStore,
    SlotCollectionRepository,
    SlotObjectRepository,
)
from bizdesk.infrastructure.seed.loader import load_seed, load_seed_object
from bizdesk.infrastructure.storage import InMemoryKeyValueStore, JsonFileKeyValueStore

logger = logging.getLogger(__name__)

# Fixed slot names, one per entity kind.
CLIENTS_SLOT = "clients"
PROJECTS_SLOT = "projects"
TASKS_SLOT = "tasks"
USERS_SLOT = "users"
TIMESHEETS_SLOT = "timesheets"
GENERAL_SETTINGS_SLOT = "generalSettings"
ROLES_SLOT = "roles"


@dataclass
class ServiceContainer:
    """Every service, sharing one store and one repository per slot."""

    settings: Settings
    store: KeyValueStore
    clients: ClientService
    projects: ProjectService
    tasks: TaskService
    users: UserService
    timesheets: TimesheetService
    settings_service: SettingsService
    reports: ReportService

    async def reload(self) -> None:
        """Drop every cached collection so other writers become visible."""
        for service in (
            self.clients,
            self.projects,
            self.tasks,
            self.users,
            self.timesheets,
            self.settings_service,
        ):
            await service.reload()

    async def close(self) -> None:
        if isinstance(self.store, SQLAlchemyKeyValueStore):
            await self.store.dispose()


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Instantiate the adapter named by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage_backend == "sqlite":
        return SQLAlchemyKeyValueStore(create_engine(settings))
    return JsonFileKeyValueStore(settings.data_dir)


def build_container(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    *,
    use_seed: bool = True,
) -> ServiceContainer:
    """Wire the whole data layer.

    ``store`` overrides the configured backend (tests pass an in-memory
    store). With ``use_seed=False`` every slot starts empty.
    """
    settings = settings or get_settings()
    store = store or build_key_value_store(settings)
    record_store = RecordStore(store)

    def repository(slot_key: str, record_type: type) -> SlotCollectionRepository:
        seed = load_seed(slot_key, record_type) if use_seed else []
        return SlotCollectionRepository(
            record_store,
            slot_key,
            record_type,
            seed,
            latency=settings.simulated_latency,
            raise_on_persistence_error=settings.raise_on_persistence_error,
        )

    clients = repository(CLIENTS_SLOT, Client)
    projects = repository(PROJECTS_SLOT, Project)
    tasks = repository(TASKS_SLOT, Task)
    users = repository(USERS_SLOT, User)
    timesheets = repository(TIMESHEETS_SLOT, Timesheet)
    roles = repository(ROLES_SLOT, Role)
    general = SlotObjectRepository(
        record_store,
        GENERAL_SETTINGS_SLOT,
        GeneralSettings,
        load_seed_object(GENERAL_SETTINGS_SLOT, GeneralSettings) if use_seed else GeneralSettings(),
        raise_on_persistence_error=settings.raise_on_persistence_error,
    )

    user_service = UserService(users, projects)
    container = ServiceContainer(
        settings=settings,
        store=store,
        clients=ClientService(clients),
        projects=ProjectService(projects, clients, users),
        tasks=TaskService(tasks, projects, users),
        users=user_service,
        timesheets=TimesheetService(timesheets, user_service),
        settings_service=SettingsService(roles, general, users),
        reports=ReportService(timesheets, users, clients, projects, tasks),
    )
    logger.info(
        "Data layer ready: backend=%s, latency=%dms, strict persistence=%s",
        settings.storage_backend,
        settings.simulated_latency_ms,
        settings.raise_on_persistence_error,
    )
    return container
