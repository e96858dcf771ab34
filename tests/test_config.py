"""
Unit tests for ScanConfiguration
"""

import json

import pytest

from urlsift.config import DEFAULT_USER_AGENT, ScanConfiguration, load_env_file


class TestStageFlags:

    def test_defaults_run_nothing(self):
        config = ScanConfiguration()

        assert not config.should_categorize
        assert not config.should_scan_risky
        assert not config.should_scan_reflected
        assert not config.should_request

    def test_run_all_overrides_narrow_flags(self):
        config = ScanConfiguration(run_all=True)

        assert config.should_categorize
        assert config.should_scan_risky
        assert config.should_scan_reflected
        assert config.should_request

    def test_param_scan_enables_both_parameter_stages(self):
        config = ScanConfiguration(param_scan=True)

        assert config.should_scan_risky
        assert config.should_scan_reflected
        assert not config.should_request

    def test_narrow_parameter_flags(self):
        assert ScanConfiguration(param_risky=True).should_scan_risky
        assert not ScanConfiguration(param_risky=True).should_scan_reflected
        assert ScanConfiguration(param_reflected=True).should_scan_reflected
        assert not ScanConfiguration(param_reflected=True).should_scan_risky


class TestValidation:

    def test_valid_configuration(self):
        ScanConfiguration(timeout=3, proxy="http://127.0.0.1:8080").validate()

    @pytest.mark.parametrize("kwargs", [
        {"timeout": 0},
        {"timeout": -5},
        {"proxy": "socks5://127.0.0.1:1080"},
        {"proxy": "127.0.0.1:8080"},
    ])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            ScanConfiguration(**kwargs).validate()


class TestLoading:

    def test_from_dict_ignores_unknown_keys(self):
        config = ScanConfiguration.from_dict({"timeout": 4, "run_all": True, "threads": 50})

        assert config.timeout == 4
        assert config.run_all
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"proxy": "http://proxy.local:3128", "request": True}))

        config = ScanConfiguration.load_from_file(str(path))

        assert config.proxy == "http://proxy.local:3128"
        assert config.should_request

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv("URLSIFT_TIMEOUT", "7")
        monkeypatch.setenv("URLSIFT_USER_AGENT", "scanner/1.0")
        monkeypatch.setenv("URLSIFT_PARAM_RISKY", "true")
        monkeypatch.setenv("URLSIFT_REQUEST", "0")
        monkeypatch.delenv("URLSIFT_ALL", raising=False)

        config = ScanConfiguration.load_from_env()

        assert config.timeout == 7
        assert config.user_agent == "scanner/1.0"
        assert config.param_risky
        assert not config.request
        assert not config.run_all

    def test_load_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("URLSIFT_PROXY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("# proxy settings\nexport URLSIFT_PROXY=\"http://10.0.0.1:8080\"\n")

        load_env_file(env_file)

        assert ScanConfiguration.load_from_env().proxy == "http://10.0.0.1:8080"
        monkeypatch.delenv("URLSIFT_PROXY")

    def test_env_file_does_not_override_existing_variables(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLSIFT_TIMEOUT", "3")
        monkeypatch.delenv("URLSIFT_USER_AGENT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("URLSIFT_TIMEOUT=30\nURLSIFT_USER_AGENT='from-file'\n")

        exported = load_env_file(env_file)

        assert exported == {"URLSIFT_USER_AGENT": "from-file"}
        config = ScanConfiguration.load_from_env()
        assert config.timeout == 3
        assert config.user_agent == "from-file"

    def test_env_file_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLSIFT_TIMEOUT", "3")
        env_file = tmp_path / ".env"
        env_file.write_text("URLSIFT_TIMEOUT=30\n")

        load_env_file(env_file, override=True)

        assert ScanConfiguration.load_from_env().timeout == 30

    def test_missing_env_file(self, tmp_path):
        assert load_env_file(tmp_path / ".env") == {}
