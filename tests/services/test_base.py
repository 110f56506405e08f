"""Tests for BaseService configuration handling."""

from __future__ import annotations

from litcal.config.models import CalendarConfig, ExportConfig, LitcalConfig
from litcal.config.settings import LitcalSettings
from litcal.services.base import BaseService


class TestBaseService:
    def test_defaults(self) -> None:
        svc = BaseService()
        assert svc.calendar_config == CalendarConfig()
        assert svc.export_config.indent == 2

    def test_plain_config(self) -> None:
        cfg = LitcalConfig(export=ExportConfig(indent=4))
        assert BaseService(cfg).export_config.indent == 4

    def test_settings(self) -> None:
        settings = LitcalSettings(calendar=CalendarConfig(check_start_year=2000))
        assert BaseService(settings).calendar_config.check_start_year == 2000
