"""Unit tests for ConnectionSettings."""

import dataclasses
import logging

import pytest

from evstore.client.core import ConnectionSettings, UserCredentials


def test_default_settings():
    settings = ConnectionSettings.default()
    assert settings.connection_name.startswith("evstore-http-")
    assert settings.default_user_credentials is None
    assert settings.connection_timeout is None
    assert settings.error_handler is None
    assert settings.logger is None
    assert settings.transport is None


def test_default_connection_names_are_unique():
    assert ConnectionSettings().connection_name != ConnectionSettings().connection_name


def test_with_helpers_return_new_settings():
    """with_* helpers never mutate the settings they are called on."""
    handler = lambda connection, exc: None  # noqa: E731
    base = ConnectionSettings(connection_name="orders")
    updated = base.with_credentials("admin", "changeit").with_timeout(5.0).with_error_handler(
        handler
    )

    assert base.default_user_credentials is None
    assert updated.connection_name == "orders"
    assert updated.default_user_credentials == UserCredentials("admin", "changeit")
    assert updated.connection_timeout == 5.0
    assert updated.error_handler is handler


def test_settings_are_frozen():
    settings = ConnectionSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.connection_timeout = 1.0  # type: ignore[misc]


def test_invalid_timeout_rejected():
    with pytest.raises(ValueError):
        ConnectionSettings(connection_timeout=0)


def test_empty_connection_name_rejected():
    with pytest.raises(ValueError):
        ConnectionSettings(connection_name="")


def test_credentials_require_username():
    with pytest.raises(ValueError):
        UserCredentials("", "secret")


def test_credentials_repr_hides_password():
    assert "secret" not in repr(UserCredentials("admin", "secret"))


def test_custom_logger():
    log = logging.getLogger("evstore.tests")
    assert ConnectionSettings(logger=log).logger is log
