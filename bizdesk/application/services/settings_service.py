"""Application service for workspace settings and role permissions.

General settings live in a single-object slot; roles are an ordinary
collection. Permission lookups only read role data, nothing is enforced
here.
"""

import logging

from bizdesk.application.interfaces import ObjectRepository, RecordRepository
from bizdesk.application.schemas.settings import ModulePermissionsSchema, RoleInput, SettingsUpdate
from bizdesk.application.services.base_service import RecordService
from bizdesk.domain.entities import GeneralSettings, ModulePermissions, Permission, Role, User

logger = logging.getLogger(__name__)


def _to_permissions(schema: ModulePermissionsSchema) -> ModulePermissions:
    return ModulePermissions(
        **{module: Permission(**flags.model_dump()) for module, flags in schema}
    )


class SettingsService(RecordService[Role]):
    """Orchestrates general settings and role CRUD."""

    entity_label = "Role"

    def __init__(
        self,
        repository: RecordRepository[Role],
        general: ObjectRepository[GeneralSettings],
        users: RecordRepository[User],
    ):
        super().__init__(repository)
        self._general = general
        self._users = users

    # ── General settings ────────────────────────────────────────────

    async def get_general_settings(self) -> GeneralSettings:
        return await self._general.get()

    async def update_general_settings(self, data: SettingsUpdate) -> GeneralSettings:
        settings = GeneralSettings(
            daily_working_hours=data.daily_working_hours,
            weekly_working_days=list(data.weekly_working_days),
        )
        saved = await self._general.save(settings)
        logger.info(
            "General settings updated: %s h/day, %s",
            saved.daily_working_hours,
            ", ".join(saved.weekly_working_days),
        )
        return saved

    # ── Roles ───────────────────────────────────────────────────────

    async def create_record(self, data: RoleInput) -> Role:
        role = Role(name=data.name, permissions=_to_permissions(data.permissions))
        created = await self._repository.create(role)
        logger.info("Created role %s (%s)", created.name, created.id)
        return created

    async def update_record(self, role_id: str, data: RoleInput) -> Role:
        role = await self.get_record(role_id)
        role.name = data.name
        role.permissions = _to_permissions(data.permissions)
        return await self._save(role)

    async def get_user_count(self, role_id: str) -> int:
        role = await self.get_record(role_id)
        return role.user_count

    async def assign_role(self, role_id: str) -> Role:
        role = await self.get_record(role_id)
        role.user_count += 1
        return await self._save(role)

    async def unassign_role(self, role_id: str) -> Role:
        role = await self.get_record(role_id)
        role.user_count = max(0, role.user_count - 1)
        return await self._save(role)

    async def has_permission(self, user_id: str, module: str, permission: str) -> bool:
        """Whether the role named on the user grants ``permission`` on ``module``.

        Users whose role name matches no role have no permissions.
        """
        user = await self._require(self._users, user_id, "User")
        for role in await self._repository.get_all():
            if role.name == user.role:
                return role.allows(module, permission)
        return False
