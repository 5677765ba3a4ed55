"""
hostsfile 主应用模块
"""

import logging
import sys
from typing import List

from hostsfile.config import Config
from hostsfile.errors import CouldNotOpen
from hostsfile.models import DroppedLine, Record
from hostsfile.parser import HostsParser


class HostsApp:
    """
    主应用控制器

    - 校验配置并设置日志
    - 解析配置中的 hosts 文件
    - 报告解析出的记录和被丢弃的行
    """

    def __init__(self, config: Config):
        """
        初始化应用

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostsfile')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def run(self) -> List[Record]:
        """
        解析 hosts 文件并报告结果

        返回:
            解析出的 Record 列表

        异常:
            CouldNotOpen: 如果 hosts 文件无法打开或读取
        """
        self.logger.info("=" * 60)
        self.logger.info(f"Hosts 文件: {self.config.hosts_file_path}")
        self.logger.info("=" * 60)

        on_drop = self._report_dropped if self.config.report_dropped else None
        parser = HostsParser(self.logger, on_drop=on_drop)
        try:
            records = parser.parse(self.config.hosts_file_path)
        except CouldNotOpen as e:
            self.logger.error(f"读取 hosts 文件失败: {e}")
            raise

        if records:
            self.logger.info(f"已解析 {len(records)} 条主机记录:")
            for record in records:
                self.logger.info(f"  • {record}")
        else:
            self.logger.info("没有有效的主机记录")

        self.logger.info(
            f"共读取 {parser.line} 行, 丢弃 {parser.dropped_count} 行"
        )
        return records

    def _report_dropped(self, dropped: DroppedLine) -> None:
        """在丢弃时立即报告，不保留被丢弃的行"""
        self.logger.warning(f"已丢弃{dropped}")
