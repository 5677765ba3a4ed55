"""
hosts 文件数据模型
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from hostsfile.address import Address
from hostsfile.errors import InvalidAddress


@dataclass(frozen=True)
class Record:
    """
    代表 hosts 文件中的单条记录

    一个 Record 的存在本身就证明其地址通过了校验：
    地址必须是回环地址或私有地址，在构造时检查。

    属性:
        address: 记录的地址
        names: 映射到该地址的名称，保持文件中的顺序，允许重复
    """

    address: Address
    names: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not (self.address.is_loopback() or self.address.is_private()):
            raise InvalidAddress(str(self.address))
        if isinstance(self.names, (str, bytes)):
            raise TypeError("names 必须是名称序列，而不是单个字符串")
        object.__setattr__(self, 'names', tuple(self.names))

    @classmethod
    def create(cls, address: Address, names: Iterable[str] = ()) -> "Record":
        """
        创建经过校验的记录

        名称被视为不透明的标签，不做格式或唯一性校验。

        参数:
            address: 已解析的地址
            names: 零个或多个名称组成的序列（不能是单个字符串）

        返回:
            Record 实例

        异常:
            InvalidAddress: 如果地址既不是回环地址也不是私有地址
            TypeError: 如果 names 是单个字符串
        """
        return cls(address=address, names=names)

    def __str__(self) -> str:
        return f"{', '.join(self.names)} -> {self.address}"


@dataclass(frozen=True)
class DroppedLine:
    """
    解析时被丢弃的行，仅用于诊断

    属性:
        line_number: 行号（从 1 开始）
        text: 行内容（已去掉换行符）
        reason: 丢弃原因
    """

    line_number: int
    text: str
    reason: str

    def __str__(self) -> str:
        return f"第 {self.line_number} 行: {self.reason} ({self.text!r})"
