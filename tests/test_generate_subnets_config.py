"""Tests for netinventory.generate_subnets.config loaders."""

from __future__ import annotations

import json

import pytest

from netinventory.generate_subnets.config import load_credentials, load_endpoint_map
from netinventory.generate_subnets.exceptions import ConfigError


def _write(path, data):
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


class TestLoadEndpointMap:
    """Test load_endpoint_map."""

    def test_valid_file(self, tmp_path):
        """Nested owner/router/vCenter mapping is returned as-is."""
        data = {"owner1": {"router-a": ["vc1", "vc2"]}, "owner2": {}}
        assert load_endpoint_map(_write(tmp_path / "vcenter.json", data)) == data

    def test_accepts_str_path(self, tmp_path):
        """String paths are accepted."""
        path = _write(tmp_path / "vcenter.json", {"owner1": {"router-a": ["vc1"]}})
        assert load_endpoint_map(str(path)) == {"owner1": {"router-a": ["vc1"]}}

    def test_missing_file(self, tmp_path):
        """Unreadable file raises ConfigError."""
        with pytest.raises(ConfigError, match="Cannot read"):
            load_endpoint_map(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises ConfigError."""
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_endpoint_map(_write(tmp_path / "vcenter.json", "{not json"))

    def test_wrong_shape(self, tmp_path):
        """Endpoint values must be lists of strings."""
        with pytest.raises(ConfigError, match="vCenter association"):
            load_endpoint_map(_write(tmp_path / "vcenter.json", {"owner1": {"router-a": "vc1"}}))


class TestLoadCredentials:
    """Test load_credentials."""

    def test_go_style_keys(self, tmp_path):
        """Capitalized Username/ApiToken keys are accepted."""
        path = _write(tmp_path / "auth.json", [{"Username": "owner1", "ApiToken": "t1"}])
        creds = load_credentials(path)
        assert creds[0].username == "owner1"
        assert creds[0].api_token == "t1"

    def test_camel_case_keys(self, tmp_path):
        """camelCase username/apiToken keys are accepted."""
        path = _write(tmp_path / "auth.json", [{"username": "owner2", "apiToken": "t2"}])
        assert load_credentials(path)[0].username == "owner2"

    @pytest.mark.parametrize(
        "entry",
        [
            {"USERNAME": "owner3", "APITOKEN": "t3"},
            {"userName": "owner3", "apitoken": "t3"},
            {"uSeRnAmE": "owner3", "ApItOkEn": "t3"},
        ],
    )
    def test_keys_match_case_insensitively(self, tmp_path, entry):
        """Any capitalization of username/apiToken is accepted."""
        creds = load_credentials(_write(tmp_path / "auth.json", [entry]))
        assert creds[0].username == "owner3"
        assert creds[0].api_token == "t3"

    def test_unrelated_keys_ignored(self, tmp_path):
        """Extra keys in a credential entry are ignored."""
        path = _write(tmp_path / "auth.json", [{"Username": "owner1", "ApiToken": "t1", "comment": "prod"}])
        assert load_credentials(path)[0].username == "owner1"

    def test_order_preserved(self, tmp_path):
        """Accounts keep file order."""
        data = [{"username": name, "apiToken": "x"} for name in ("c", "a", "b")]
        assert [c.username for c in load_credentials(_write(tmp_path / "auth.json", data))] == ["c", "a", "b"]

    def test_missing_token(self, tmp_path):
        """Entries without a token are rejected."""
        with pytest.raises(ConfigError, match="credential"):
            load_credentials(_write(tmp_path / "auth.json", [{"username": "owner1"}]))

    def test_not_a_list(self, tmp_path):
        """A single object instead of an array is rejected."""
        with pytest.raises(ConfigError):
            load_credentials(_write(tmp_path / "auth.json", {"username": "owner1", "apiToken": "t"}))
