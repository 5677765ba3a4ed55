"""
hosts 文件解析的异常定义
"""

import os
from typing import Union


class HostsFileError(Exception):
    """所有 hostsfile 异常的基类"""


class AddressParseError(HostsFileError, ValueError):
    """
    地址字面量既不是点分十进制 IPv4 也不是冒号十六进制 IPv6

    属性:
        text: 无法解析的原始字面量
    """

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"无效的地址字面量: {text!r}")


class RecordError(HostsFileError):
    """构建 Record 时的校验错误"""


class InvalidAddress(RecordError):
    """
    地址可以解析，但既不是回环地址也不是私有地址

    属性:
        address: 地址的文本形式
    """

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"无效的地址 {address}: 必须是回环地址或私有地址")


class ParserError(HostsFileError):
    """解析整个文件时的错误"""


class CouldNotOpen(ParserError):
    """
    无法打开或读取 hosts 文件

    这是唯一会中止整个解析过程的错误。

    属性:
        path: 目标文件路径
        error: 底层的 OSError
    """

    def __init__(self, path: Union[str, os.PathLike], error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"无法打开 hosts 文件 {os.fspath(path)}: {error}")
