"""
hosts 文件解析模块

逐行读取 hosts 文件并构建经过校验的 Record 列表。
单行的错误（无法解析的地址、公网地址）只丢弃该行，不会中止解析；
只有无法打开或读取文件才会作为错误返回给调用者。
"""

import logging
import os
from typing import Callable, Iterator, List, Optional, Union

from hostsfile.address import Address
from hostsfile.errors import AddressParseError, CouldNotOpen, RecordError
from hostsfile.models import DroppedLine, Record

PathType = Union[str, os.PathLike]


class HostsParser:
    """
    从 hosts 文件提取 Record

    每个实例只应用于一次解析。重复使用同一实例时，
    新的记录会追加到同一个累加器中。

    属性:
        line: 已读取的行数（仅供诊断）
        records: 已接受的记录，按文件顺序
        dropped_count: 被丢弃的行数（仅供诊断）
    """

    COMMENT = '#'

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        on_drop: Optional[Callable[[DroppedLine], None]] = None
    ):
        """
        初始化解析器

        被丢弃的行不会保存在解析器中，只计数并以 DEBUG 级别记录，
        需要详细信息的调用者可以通过 on_drop 在丢弃时接收。

        参数:
            logger: 日志记录器实例，默认为 "hostsfile"
            on_drop: 每丢弃一行时调用，参数为 DroppedLine
        """
        self.logger = logger or logging.getLogger('hostsfile')
        self.on_drop = on_drop
        self.line = 0
        self.records: List[Record] = []
        self.dropped_count = 0

    def parse(self, path: PathType) -> List[Record]:
        """
        解析 hosts 文件

        参数:
            path: hosts 文件路径

        返回:
            按文件顺序排列的 Record 列表（可能为空）

        异常:
            CouldNotOpen: 如果文件无法打开或读取
        """
        for _ in self.iter_records(path):
            pass
        return list(self.records)

    def iter_records(self, path: PathType) -> Iterator[Record]:
        """
        惰性地逐行解析 hosts 文件，每接受一条记录就产出一次

        被丢弃的行不会被保留，内存占用只与有效记录数有关，与文件大小无关。

        参数:
            path: hosts 文件路径

        异常:
            CouldNotOpen: 如果文件无法打开或读取
        """
        self.logger.debug(f"正在解析 hosts 文件: {os.fspath(path)}")

        try:
            with open(path, 'rb') as f:
                for raw in f:
                    self.line += 1
                    record = self._parse_line(raw)
                    if record is not None:
                        self.records.append(record)
                        yield record
        except OSError as e:
            self.logger.debug(f"无法打开 hosts 文件 {os.fspath(path)}: {e}")
            raise CouldNotOpen(path, e) from e

        self.logger.debug(
            f"解析完成: {self.line} 行, {len(self.records)} 条记录, "
            f"{self.dropped_count} 行被丢弃"
        )

    def _parse_line(self, raw: bytes) -> Optional[Record]:
        """
        解析单行

        参数:
            raw: 原始字节行（可能带有 \\n 或 \\r\\n）

        返回:
            Record，如果该行被跳过或丢弃则返回 None
        """
        raw = raw.rstrip(b'\n')
        if raw.endswith(b'\r'):
            raw = raw[:-1]

        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError:
            self._drop(raw.decode('utf-8', errors='replace'), "不是有效的 UTF-8")
            return None

        # 空行和整行注释（不支持行内注释）
        if not text or text.startswith(self.COMMENT):
            return None

        tokens = [token for token in text.replace('\t', ' ').split(' ') if token]
        if not tokens:
            return None

        address_text, names = tokens[0], tokens[1:]

        try:
            address = Address.parse(address_text)
        except AddressParseError:
            self._drop(text, f"无法解析地址 {address_text!r}")
            return None

        try:
            return Record.create(address, names)
        except RecordError as e:
            self._drop(text, str(e))
            return None

    def _drop(self, text: str, reason: str) -> None:
        self.dropped_count += 1
        dropped = DroppedLine(line_number=self.line, text=text, reason=reason)
        self.logger.debug(f"丢弃{dropped}")
        if self.on_drop is not None:
            self.on_drop(dropped)


def parse(path: PathType, logger: Optional[logging.Logger] = None) -> List[Record]:
    """
    使用新的解析器实例解析 hosts 文件

    参数:
        path: hosts 文件路径
        logger: 日志记录器实例

    返回:
        Record 列表

    异常:
        CouldNotOpen: 如果文件无法打开或读取
    """
    return HostsParser(logger).parse(path)
