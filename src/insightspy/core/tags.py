"""Context tags and typed access to well-known tag keys.

Tags are plain string pairs on the wire. The tag groups below only provide
named attributes for the keys the ingestion backend understands, e.g.
``tags.operation.id`` reads and writes ``"ai.operation.id"``.
"""

from typing import Any

from insightspy.core.containers import _Container


class _Tag:
    """Descriptor mapping an attribute onto one tag key."""

    def __init__(self, key: str) -> None:
        self.key = key

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, group: Any, owner: type | None = None) -> Any:
        if group is None:
            return self
        return group._tags.get(self.key)

    def __set__(self, group: Any, value: str | None) -> None:
        if value is None:
            group._tags.pop(self.key, None)
        else:
            group._tags[self.key] = value


class _TagGroup:
    def __init__(self, tags: "ContextTags") -> None:
        self._tags = tags


class ApplicationTags(_TagGroup):
    ver = _Tag("ai.application.ver")


class CloudTags(_TagGroup):
    role = _Tag("ai.cloud.role")
    role_instance = _Tag("ai.cloud.roleInstance")


class DeviceTags(_TagGroup):
    id = _Tag("ai.device.id")
    locale = _Tag("ai.device.locale")
    model = _Tag("ai.device.model")
    oem_name = _Tag("ai.device.oemName")
    os_version = _Tag("ai.device.osVersion")
    type = _Tag("ai.device.type")


class LocationTags(_TagGroup):
    ip = _Tag("ai.location.ip")
    country = _Tag("ai.location.country")
    province = _Tag("ai.location.province")
    city = _Tag("ai.location.city")


class OperationTags(_TagGroup):
    id = _Tag("ai.operation.id")
    name = _Tag("ai.operation.name")
    parent_id = _Tag("ai.operation.parentId")
    synthetic_source = _Tag("ai.operation.syntheticSource")
    correlation_vector = _Tag("ai.operation.correlationVector")


class SessionTags(_TagGroup):
    id = _Tag("ai.session.id")
    is_first = _Tag("ai.session.isFirst")


class UserTags(_TagGroup):
    account_id = _Tag("ai.user.accountId")
    id = _Tag("ai.user.id")
    auth_user_id = _Tag("ai.user.authUserId")


class InternalTags(_TagGroup):
    sdk_version = _Tag("ai.internal.sdkVersion")
    agent_version = _Tag("ai.internal.agentVersion")
    node_name = _Tag("ai.internal.nodeName")


class ContextTags(_Container[str]):
    """Context tags such as device, session, user and operation attributes.

    Example:
        ```python
        tags = ContextTags()
        tags.operation.id = "4bf92f3577b34da6"
        tags.cloud.role = "checkout"
        assert tags == {"ai.operation.id": "4bf92f3577b34da6",
                        "ai.cloud.role": "checkout"}
        ```
    """

    @property
    def application(self) -> ApplicationTags:
        return ApplicationTags(self)

    @property
    def cloud(self) -> CloudTags:
        return CloudTags(self)

    @property
    def device(self) -> DeviceTags:
        return DeviceTags(self)

    @property
    def location(self) -> LocationTags:
        return LocationTags(self)

    @property
    def operation(self) -> OperationTags:
        return OperationTags(self)

    @property
    def session(self) -> SessionTags:
        return SessionTags(self)

    @property
    def user(self) -> UserTags:
        return UserTags(self)

    @property
    def internal(self) -> InternalTags:
        return InternalTags(self)
