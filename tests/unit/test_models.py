"""
Model Unit Tests
"""

import pytest
from pydantic import ValidationError

from fiskaly_sdk.models import (
    ClientConfiguration,
    ConfigParams,
    RequestDescriptor,
    RequestResponse,
    VersionInfo,
)


class TestConfigParams:
    def test_to_params_omits_unset(self):
        assert ConfigParams(debug_level=3).to_params() == {"debug_level": 3}

    @pytest.mark.parametrize("level", [-1, 0, 4])
    def test_debug_level_range(self, level):
        assert ConfigParams(debug_level=level).debug_level == level

    @pytest.mark.parametrize("data", [{"debug_level": 5}, {"client_timeout": 0}, {"extra": 1}])
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            ConfigParams(**data)


class TestClientConfiguration:
    def test_ignores_unknown_fields(self):
        config = ClientConfiguration.model_validate({
            "debug_level": 0,
            "debug_file": "-",
            "client_timeout": 1500,
            "smaers_timeout": 1500,
            "http_proxy": "",
        })
        assert config.client_timeout == 1500


class TestRequestDescriptor:
    def test_defaults(self):
        assert RequestDescriptor().to_params() == {"method": "GET", "path": "/"}

    def test_keeps_given_optionals(self):
        descriptor = RequestDescriptor(method="POST", path="/tss", query={"a": "1"}, body="e30=")
        assert descriptor.to_params() == {
            "method": "POST",
            "path": "/tss",
            "query": {"a": "1"},
            "body": "e30=",
        }

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            RequestDescriptor(path="")


class TestRequestResponse:
    def test_accessors(self):
        result = RequestResponse(
            response={"status": 201, "header": {"Content-Type": ["application/json"]}, "body": "e30="},
            context="ctx",
        )
        assert result.status == 201
        assert result.headers == {"Content-Type": ["application/json"]}
        assert result.body == "e30="

    def test_empty_response(self):
        result = RequestResponse(context="ctx")
        assert result.status is None
        assert result.headers == {}
        assert result.body is None


class TestVersionInfo:
    def test_str(self):
        version = VersionInfo(
            client_version="1.2.3",
            client_source_hash="src",
            client_commit_hash="abc",
            smaers_version="2.0.0",
        )
        assert str(version) == "client 1.2.3 (abc), SMAERS 2.0.0"
