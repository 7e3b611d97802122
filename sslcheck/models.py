"""
数据模型定义
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .services.error_handler import SSLCheckError


DEFAULT_PORT = "443"
# 端口最长5个字符（65535）
MAX_PORT_LENGTH = 5


class OutputMode(str, Enum):
    """输出模式"""
    PLAIN = "plain"
    SHORT = "short"
    JSON = "json"


@dataclass(frozen=True)
class ConnectionTarget:
    """连接目标"""
    host: str
    port: str = DEFAULT_PORT

    @classmethod
    def from_input(cls, host: str, port: Optional[str] = None) -> "ConnectionTarget":
        """
        根据命令行输入构造连接目标

        Args:
            host: 域名，原样保留
            port: 端口字符串，为空时使用默认值443，超过5个字符时截断

        Returns:
            ConnectionTarget: 连接目标
        """
        if not port:
            port = DEFAULT_PORT
        return cls(host=host, port=port[:MAX_PORT_LENGTH])

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class PeerCertificate:
    """握手得到的叶子证书（DER编码）"""
    der: bytes


@dataclass(frozen=True)
class ExpiryResult:
    """检查结果，days为None表示检查失败"""
    domain: str
    days: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.days is not None


@dataclass(frozen=True)
class CheckOutcome:
    """检查结果及导致失败的错误"""
    result: ExpiryResult
    error: Optional["SSLCheckError"] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.result.is_success


@dataclass(frozen=True)
class CheckConfig:
    """单次运行的配置"""
    target: ConnectionTarget
    output_mode: OutputMode = OutputMode.PLAIN
    log_level: str = "WARNING"
