"""
证书检查入口
"""
import ssl
from typing import Callable, Optional

from .interfaces import ConnectorInterface
from .models import CheckOutcome, ConnectionTarget, ExpiryResult
from .services.connector import Connector, create_client_context
from .services.error_handler import CheckErrorHandler, SSLCheckError
from .services.expiry_calculator import ExpiryCalculator
from .services.logger import LoggerService


class SSLCheckRunner:
    """证书检查器主类"""

    def __init__(self,
                 context_factory: Callable[[], ssl.SSLContext] = create_client_context,
                 connector_factory: Callable[[ssl.SSLContext], ConnectorInterface] = Connector,
                 logger_service: Optional[LoggerService] = None):
        """
        初始化检查器

        Args:
            context_factory: 创建TLS上下文的函数
            connector_factory: 根据上下文创建连接器
            logger_service: 日志服务
        """
        self.context_factory = context_factory
        self.connector_factory = connector_factory
        self.logger_service = logger_service or LoggerService()
        self.error_handler = CheckErrorHandler()

    def check(self, target: ConnectionTarget) -> CheckOutcome:
        """
        检查目标的证书剩余天数

        所有SSLCheckError都转换为days为None的结果。

        Args:
            target: 连接目标

        Returns:
            CheckOutcome: 检查结果
        """
        domain = target.host
        self.logger_service.log_check_start(target)

        try:
            context = self.context_factory()
            connector = self.connector_factory(context)
            certificate = connector.fetch_certificate(target)
            days = ExpiryCalculator(domain).days_remaining(certificate)

        except SSLCheckError as e:
            self.logger_service.log_error(domain, e)
            self.error_handler.handle_check_error(domain, e)

            result = ExpiryResult(domain=domain)
            self.logger_service.log_check_result(result)
            return CheckOutcome(result=result, error=e)

        result = ExpiryResult(domain=domain, days=days)
        self.logger_service.log_check_result(result)
        return CheckOutcome(result=result)

    def describe_error(self, outcome: CheckOutcome) -> Optional[str]:
        """获取失败结果的错误信息"""
        if outcome.error is None:
            return None
        return self.error_handler.describe(outcome.error)
