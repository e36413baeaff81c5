"""ValidationService — batch resource name validation as a ServiceResult."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from resname.domain.names import (
    Name,
    NameValidationError,
    check_length,
    check_non_ascii,
    display_name,
)
from resname.services.base import BaseService
from resname.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

OP = "validate_names"


class ValidationService(BaseService):
    """Validate candidate names against the configured length limit."""

    def validate(self, names: Iterable[Name]) -> ServiceResult:
        """Check *names* in order and report the first failure.

        Names after the first invalid one are never inspected. The failing
        position is reported as ``error.detail["index"]``. Names may be
        ``bytes`` (e.g. raw stdin lines); they are reported as text.
        """
        limit = self._settings.max_length
        checked: list[str] = []
        for index, name in enumerate(names):
            try:
                check_non_ascii(name)
                check_length(name, limit)
            except NameValidationError as exc:
                logger.debug("Rejected name at index %d: %s", index, exc.code)
                return ServiceResult(
                    ok=False,
                    op=OP,
                    error=ServiceError(
                        code=exc.code,
                        message=exc.message,
                        detail={**exc.to_detail(), "index": index},
                    ),
                )
            checked.append(display_name(name))

        warnings: list[str] = []
        if not checked:
            warnings.append("No names given")
        logger.debug("Validated %d name(s) with limit %d", len(checked), limit)
        return ServiceResult(
            ok=True,
            op=OP,
            data={"names": checked, "count": len(checked), "limit": limit},
            warnings=warnings,
        )
