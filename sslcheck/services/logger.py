"""
日志服务
"""
import os
import logging
import traceback
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from ..interfaces import LoggerServiceInterface
from ..models import ConnectionTarget, ExpiryResult


class LoggerService(LoggerServiceInterface):
    """日志服务实现"""

    def __init__(self, logger_name: str = "sslcheck", log_level: Optional[str] = None):
        """
        初始化日志服务

        Args:
            logger_name: 日志器名称
            log_level: 日志级别，如果为None则从环境变量读取
        """
        self.logger_name = logger_name
        self.log_level = log_level or os.getenv('LOG_LEVEL', 'WARNING')

        # 配置日志器
        self.logger = logging.getLogger(logger_name)
        self._configure_logger()

        # 执行统计
        self.execution_stats = {
            'start_time': None,
            'end_time': None,
            'target': None,
            'error': None
        }

    def _configure_logger(self):
        """配置日志器"""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        self.logger.setLevel(level)

        # 避免重复添加处理器
        if not self.logger.handlers:
            # 输出到标准错误，标准输出只留给检查结果
            handler = logging.StreamHandler()
            handler.setLevel(level)

            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            handler.setFormatter(formatter)

            self.logger.addHandler(handler)
        else:
            for handler in self.logger.handlers:
                handler.setLevel(level)

        self.logger.propagate = False

    def log_check_start(self, target: ConnectionTarget):
        """
        记录检查开始

        Args:
            target: 连接目标
        """
        self.execution_stats['start_time'] = datetime.now(timezone.utc)
        self.execution_stats['target'] = target.address

        self.logger.info(f"开始检查 {target.address} 的证书")

    def log_check_result(self, result: ExpiryResult):
        """
        记录检查结果

        Args:
            result: 检查结果
        """
        self.execution_stats['end_time'] = datetime.now(timezone.utc)

        if result.is_success:
            self.logger.info(f"证书正常 - 域名: {result.domain}, 剩余天数: {result.days} 天")
        else:
            self.logger.info(f"证书检查失败 - 域名: {result.domain}")

    def log_error(self, domain: str, error: Exception):
        """
        记录错误信息

        Args:
            domain: 域名
            error: 异常对象
        """
        self.execution_stats['error'] = {
            'domain': domain,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'timestamp': datetime.now(timezone.utc).isoformat()
        }

        self.logger.info(
            f"域名 {domain} 检查时发生错误: {type(error).__name__}: {str(error)}"
        )

        # 详细的堆栈跟踪（调试级别）
        self.logger.debug(f"域名 {domain} 错误堆栈跟踪:\n{traceback.format_exc()}")

    def get_execution_summary(self) -> Dict[str, Any]:
        """
        获取执行摘要

        Returns:
            Dict[str, Any]: 执行摘要信息
        """
        start = self.execution_stats['start_time']
        end = self.execution_stats['end_time']
        duration = (end - start).total_seconds() if start and end else 0

        return {
            'start_time': start.isoformat() if start else None,
            'end_time': end.isoformat() if end else None,
            'duration_seconds': duration,
            'target': self.execution_stats['target'],
            'error': self.execution_stats['error']
        }

    def reset_stats(self):
        """重置执行统计"""
        self.execution_stats = {
            'start_time': None,
            'end_time': None,
            'target': None,
            'error': None
        }
