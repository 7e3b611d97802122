"""
服务接口定义
"""
from abc import ABC, abstractmethod
from typing import Optional
from .models import ConnectionTarget, PeerCertificate, ExpiryResult, OutputMode


class ConnectorInterface(ABC):
    """TLS连接器接口"""
    
    @abstractmethod
    def fetch_certificate(self, target: ConnectionTarget) -> PeerCertificate:
        """握手并获取对端叶子证书"""
        pass


class OutputFormatterInterface(ABC):
    """输出格式化接口"""
    
    @abstractmethod
    def render(self, result: ExpiryResult, mode: OutputMode) -> Optional[str]:
        """生成标准输出内容"""
        pass


class LoggerServiceInterface(ABC):
    """日志服务接口"""
    
    @abstractmethod
    def log_check_start(self, target: ConnectionTarget):
        """记录检查开始"""
        pass
    
    @abstractmethod
    def log_check_result(self, result: ExpiryResult):
        """记录检查结果"""
        pass
    
    @abstractmethod
    def log_error(self, domain: str, error: Exception):
        """记录错误信息"""
        pass
