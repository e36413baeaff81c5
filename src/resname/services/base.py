"""BaseService — foundation for resname services.

Every service receives the resolved :class:`ResnameSettings` at
construction time and reads its limits from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resname.config.settings import ResnameSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate(self, names) -> ServiceResult:
                limit = self._settings.max_length
                ...
    """

    def __init__(self, settings: ResnameSettings | None = None) -> None:
        if settings is None:
            from resname.config.settings import ResnameSettings

            settings = ResnameSettings()
        self._settings = settings
