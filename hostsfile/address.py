"""
网络地址模型和地址分类模块

Address 是 IPv4 / IPv6 的标签联合类型，只保存定宽的整数值。
回环和私有地址的范围在这里显式定义，是后续所有校验的唯一边界。
"""

import ipaddress
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from hostsfile.errors import AddressParseError

# (网络前缀值, 前缀长度)
Ranges = Tuple[Tuple[int, int], ...]


class Address(ABC):
    """
    IPv4 或 IPv6 地址

    只能通过 parse() 从文本字面量创建，或由合法范围内的整数直接构造，
    不存在部分构造或无效的状态。创建后不可修改。
    """

    VERSION: int = 0
    BITS: int = 0
    LOOPBACK: Ranges = ()
    PRIVATE: Ranges = ()

    value: int

    @staticmethod
    def parse(text: str) -> "Address":
        """
        解析地址字面量

        参数:
            text: 点分十进制 IPv4 或冒号十六进制 IPv6 字面量

        返回:
            IPv4 或 IPv6 实例

        异常:
            AddressParseError: 如果字面量不符合任一语法
        """
        if not isinstance(text, str):
            raise AddressParseError(text)

        # 不接受带 zone 后缀的 IPv6 和首尾空白
        if '%' in text or text != text.strip():
            raise AddressParseError(text)

        try:
            parsed = ipaddress.ip_address(text)
        except ValueError as e:
            raise AddressParseError(text) from e

        if parsed.version == 4:
            return IPv4(int(parsed))
        return IPv6(int(parsed))

    @property
    def version(self) -> int:
        return self.VERSION

    def _check_value(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise AddressParseError(self.value)
        if not 0 <= self.value < (1 << self.BITS):
            raise AddressParseError(self.value)

    def _in_ranges(self, ranges: Ranges) -> bool:
        for network, prefix_len in ranges:
            host_bits = self.BITS - prefix_len
            if self.value >> host_bits == network >> host_bits:
                return True
        return False

    def is_loopback(self) -> bool:
        """是否为回环地址"""
        return self._in_ranges(self.LOOPBACK)

    def is_private(self) -> bool:
        """是否位于私有地址范围内（IPv6 为唯一本地地址）"""
        return self._in_ranges(self.PRIVATE)

    def is_global(self) -> bool:
        """既不是回环地址也不是私有地址"""
        return not (self.is_loopback() or self.is_private())

    def is_acceptable(self) -> bool:
        """是否可以用于静态 hosts 记录"""
        return self.is_loopback() or self.is_private()

    @abstractmethod
    def __str__(self) -> str:
        """规范文本形式"""


@dataclass(frozen=True, repr=False)
class IPv4(Address):
    """
    32 位 IPv4 地址

    回环: 127.0.0.0/8
    私有: 10.0.0.0/8, 172.16.0.0/12, 192.168.0.0/16
    """

    VERSION = 4
    BITS = 32
    LOOPBACK = ((0x7F000000, 8),)
    PRIVATE = (
        (0x0A000000, 8),
        (0xAC100000, 12),
        (0xC0A80000, 16),
    )

    value: int

    def __post_init__(self) -> None:
        self._check_value()

    def __str__(self) -> str:
        return str(ipaddress.IPv4Address(self.value))

    def __repr__(self) -> str:
        return f"IPv4('{self}')"


@dataclass(frozen=True, repr=False)
class IPv6(Address):
    """
    128 位 IPv6 地址

    回环: ::1/128
    私有: fc00::/7（唯一本地地址）
    """

    VERSION = 6
    BITS = 128
    LOOPBACK = ((1, 128),)
    PRIVATE = ((0xFC << 120, 7),)

    value: int

    def __post_init__(self) -> None:
        self._check_value()

    def __str__(self) -> str:
        return str(ipaddress.IPv6Address(self.value))

    def __repr__(self) -> str:
        return f"IPv6('{self}')"
