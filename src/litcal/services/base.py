"""BaseService, the foundation for litcal services.

Services are stateless apart from the configuration they are built with.
Calendar results themselves are memoised in the domain layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from litcal.config.models import CalendarConfig, ExportConfig, LitcalConfig

if TYPE_CHECKING:
    from litcal.config.settings import LitcalSettings


class BaseService:
    """Base for service-layer classes.

    Accepts either the plain :class:`LitcalConfig` or the CLI's
    :class:`LitcalSettings`; both expose the ``calendar`` and ``export``
    sections.

    Usage::

        class CalendarService(BaseService):
            def easter(self, year: int) -> ServiceResult:
                ...
    """

    def __init__(self, config: LitcalConfig | LitcalSettings | None = None) -> None:
        self._config = config if config is not None else LitcalConfig()

    @property
    def calendar_config(self) -> CalendarConfig:
        return self._config.calendar

    @property
    def export_config(self) -> ExportConfig:
        return self._config.export
