"""
Tests for environment-based configuration
"""

import pytest
from decimal import Decimal

from pydantic import ValidationError

from guarded_account import config as config_module
from guarded_account.config import GuardedAccountConfig, get_config, reload_config
from guarded_account.accounts import Account
from guarded_account.decorators import WithdrawalLimitDecorator


class TestGuardedAccountConfig:
    """Test configuration defaults and overrides"""

    def test_defaults(self, monkeypatch):
        for name in ("ACCOUNT_NUMBER", "WITHDRAWAL_LIMIT", "ISOLATE_OBSERVER_ERRORS", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"GUARDED_ACCOUNT_{name}", raising=False)

        settings = GuardedAccountConfig(_env_file=None)

        assert settings.account_number == "123456"
        assert settings.withdrawal_limit == Decimal('500')
        assert settings.isolate_observer_errors is True
        assert settings.log_level == "WARNING"
        assert settings.log_format == "json"

    def test_environment_overrides(self, monkeypatch):
        """Test GUARDED_ACCOUNT_* variables are read and converted"""
        monkeypatch.setenv("GUARDED_ACCOUNT_WITHDRAWAL_LIMIT", "750.50")
        monkeypatch.setenv("GUARDED_ACCOUNT_ACCOUNT_NUMBER", "999000")
        monkeypatch.setenv("GUARDED_ACCOUNT_ISOLATE_OBSERVER_ERRORS", "false")

        settings = GuardedAccountConfig(_env_file=None)

        assert settings.withdrawal_limit == Decimal('750.50')
        assert settings.account_number == "999000"
        assert settings.isolate_observer_errors is False

    def test_get_config_returns_global_instance(self):
        assert get_config() is config_module.config

    def test_reload_config_picks_up_environment(self, monkeypatch):
        """Test reload replaces the global instance used by accounts and decorators"""
        monkeypatch.setenv("GUARDED_ACCOUNT_WITHDRAWAL_LIMIT", "250")
        monkeypatch.setenv("GUARDED_ACCOUNT_ISOLATE_OBSERVER_ERRORS", "false")
        try:
            reloaded = reload_config()

            assert get_config() is reloaded
            assert reloaded.withdrawal_limit == Decimal('250')

            secure = WithdrawalLimitDecorator(Account("123456", Decimal('1000')))
            assert secure.limit == Decimal('250')
            assert Account("123456").observers.isolate_errors is False
        finally:
            monkeypatch.delenv("GUARDED_ACCOUNT_WITHDRAWAL_LIMIT")
            monkeypatch.delenv("GUARDED_ACCOUNT_ISOLATE_OBSERVER_ERRORS")
            reload_config()

    def test_log_level_normalised(self):
        settings = GuardedAccountConfig(_env_file=None, log_level="debug", log_format="TEXT")

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"

    def test_invalid_log_level_rejected_on_load(self, monkeypatch):
        """Test an unknown level fails when the configuration is read"""
        monkeypatch.setenv("GUARDED_ACCOUNT_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="log_level"):
            GuardedAccountConfig(_env_file=None)

    def test_invalid_log_format_rejected(self):
        with pytest.raises(ValidationError, match="log_format"):
            GuardedAccountConfig(_env_file=None, log_format="xml")
