# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import logging
import socket
import ssl

import httpx
import pytest

from boxhttp import config, log
from boxhttp.config import DEFAULT_USER_AGENT
from boxhttp.errors import (
    ErrorCategory,
    MalformedRequestError,
    MissingFilePart,
    PreconditionError,
    categorize_exception,
    error_category_to_reason,
    require,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("BOX_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("BOX_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("BOX_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("BOX_HTTP_VERIFY_SSL", "0")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("BOX_HTTP_TIMEOUT", "not-a-number")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert DEFAULT_USER_AGENT in settings.user_agent


def test_http_settings_redirects_truthy_variants(monkeypatch):
    monkeypatch.setenv("BOX_HTTP_REDIRECTS", "1")
    assert config.load_http_settings().allow_redirects is True
    monkeypatch.setenv("BOX_HTTP_REDIRECTS", "on")
    assert config.load_http_settings().allow_redirects is True


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("BOX_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("BOX_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_box_config_defaults_and_endpoints(monkeypatch):
    monkeypatch.delenv("BOX_API_BASE_URI", raising=False)
    monkeypatch.delenv("BOX_UPLOAD_BASE_URI", raising=False)
    box = config.load_box_config()
    assert box.files_endpoint_uri == "https://api.box.com/2.0/files/"
    assert box.folders_endpoint_uri == "https://api.box.com/2.0/folders/"
    assert box.comments_endpoint_uri == "https://api.box.com/2.0/comments/"
    assert box.files_upload_endpoint_uri == "https://upload.box.com/api/2.0/files/content"
    assert box.files_new_version_endpoint_uri("9") == "https://upload.box.com/api/2.0/files/9/content"


def test_box_config_env_adds_trailing_slash(monkeypatch):
    monkeypatch.setenv("BOX_API_BASE_URI", "http://localhost:8080/2.0")
    monkeypatch.setenv("BOX_UPLOAD_BASE_URI", "  ")
    box = config.load_box_config()
    assert box.files_endpoint_uri == "http://localhost:8080/2.0/files/"
    assert box.upload_base_uri == config.DEFAULT_UPLOAD_BASE_URI


def test_setup_logging_quiets_transport_loggers():
    log.setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    log.setup_logging("DEBUG")
    assert logging.getLogger("httpcore").level == logging.DEBUG


def test_require_and_precondition_error():
    assert require("abc", "id") == "abc"
    assert require(0, "offset") == 0
    with pytest.raises(PreconditionError) as excinfo:
        require("  ", "id")
    assert excinfo.value.name == "id"
    assert isinstance(excinfo.value, ValueError)
    with pytest.raises(PreconditionError):
        require(None, "stream")


def test_missing_file_part_is_malformed_request():
    assert issubclass(MissingFilePart, MalformedRequestError)
    assert "file part" in str(MissingFilePart())


def test_categorize_exception_maps_transport_errors():
    request = httpx.Request("GET", "https://api.box.com/2.0/files/1")
    assert categorize_exception(httpx.ReadTimeout("t", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("c", request=request)) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("x")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    request = httpx.Request("GET", "https://api.box.com/2.0/files/1")

    tls = httpx.ConnectError("tls", request=request)
    tls.__cause__ = ssl.SSLError("certificate verify failed")
    assert categorize_exception(tls) is ErrorCategory.SSL_ERROR

    dns = httpx.ConnectError("dns", request=request)
    dns.__cause__ = socket.gaierror("Name or service not known")
    assert categorize_exception(dns) is ErrorCategory.DNS_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT).startswith("Network timeout")
    assert error_category_to_reason(None) == ""
    assert error_category_to_reason(ErrorCategory.NONE) == ""
