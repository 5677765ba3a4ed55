"""
hostsfile - 解析并校验静态 hosts 文件
"""

__version__ = "1.0.0"
__author__ = "hostsfile Project"

from hostsfile.address import Address, IPv4, IPv6
from hostsfile.app import HostsApp
from hostsfile.config import Config
from hostsfile.errors import (
    AddressParseError,
    CouldNotOpen,
    HostsFileError,
    InvalidAddress,
    ParserError,
    RecordError,
)
from hostsfile.models import DroppedLine, Record
from hostsfile.parser import HostsParser, parse

__all__ = [
    "Address",
    "IPv4",
    "IPv6",
    "HostsApp",
    "Config",
    "AddressParseError",
    "CouldNotOpen",
    "HostsFileError",
    "InvalidAddress",
    "ParserError",
    "RecordError",
    "DroppedLine",
    "Record",
    "HostsParser",
    "parse",
]
