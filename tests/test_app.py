"""配置和主应用的测试"""

import logging
from pathlib import Path

import pytest

from hostsfile.app import HostsApp
from hostsfile.config import Config
from hostsfile.errors import CouldNotOpen


class TestConfig:
    """验证环境变量配置"""

    def test_defaults(self, monkeypatch) -> None:
        """未设置环境变量时使用默认值"""
        for name in ("HOSTS_FILE", "LOG_LEVEL", "REPORT_DROPPED"):
            monkeypatch.delenv(name, raising=False)
        config = Config.from_env()
        assert config.hosts_file_path == "/etc/hosts"
        assert config.log_level == "INFO"
        assert config.report_dropped is False

    def test_from_env(self, monkeypatch) -> None:
        """环境变量覆盖默认值"""
        monkeypatch.setenv("HOSTS_FILE", "/tmp/hosts")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("REPORT_DROPPED", "TRUE")
        config = Config.from_env()
        assert config.hosts_file_path == "/tmp/hosts"
        assert config.log_level == "DEBUG"
        assert config.report_dropped is True

    def test_invalid_log_level(self) -> None:
        """未知的日志级别无法通过校验"""
        with pytest.raises(ValueError):
            Config(log_level="VERBOSE").validate()

    def test_empty_hosts_path(self) -> None:
        """hosts 文件路径不能为空"""
        with pytest.raises(ValueError):
            Config(hosts_file_path="").validate()


class TestHostsApp:
    """验证应用的运行和日志输出"""

    def _config(self, tmp_path: Path, content: str, **kwargs) -> Config:
        path = tmp_path / "hosts"
        path.write_text(content)
        return Config(hosts_file_path=str(path), **kwargs)

    def test_invalid_config_raises(self) -> None:
        """无效配置在构造时抛出 ValueError"""
        with pytest.raises(ValueError):
            HostsApp(Config(log_level="LOUD"))

    def test_run_returns_records(self, tmp_path: Path, caplog) -> None:
        """run() 返回解析结果并记录每条记录"""
        config = self._config(tmp_path, "127.0.0.1 localhost\n8.8.8.8 dns.google\n")
        app = HostsApp(config)
        with caplog.at_level(logging.INFO, logger="hostsfile"):
            records = app.run()
        assert len(records) == 1
        messages = [r.getMessage() for r in caplog.records]
        assert any("localhost -> 127.0.0.1" in m for m in messages)
        assert not any(r.levelno == logging.WARNING for r in caplog.records)

    def test_report_dropped(self, tmp_path: Path, caplog) -> None:
        """启用 report_dropped 时每个被丢弃的行记录一条警告"""
        config = self._config(
            tmp_path, "8.8.8.8 dns.google\nbad line\n", report_dropped=True
        )
        app = HostsApp(config)
        with caplog.at_level(logging.INFO, logger="hostsfile"):
            assert app.run() == []
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 2

    def test_missing_file_logged_and_raised(self, tmp_path: Path, caplog) -> None:
        """无法打开的文件记录错误并重新抛出"""
        app = HostsApp(Config(hosts_file_path=str(tmp_path / "missing")))
        with caplog.at_level(logging.INFO, logger="hostsfile"):
            with pytest.raises(CouldNotOpen):
                app.run()
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_no_duplicate_handlers(self, tmp_path: Path) -> None:
        """重复创建应用不会添加重复的处理器"""
        config = self._config(tmp_path, "")
        first = HostsApp(config)
        count = len(first.logger.handlers)
        second = HostsApp(config)
        assert second.logger is first.logger
        assert len(second.logger.handlers) == count
