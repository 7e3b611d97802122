"""
错误处理服务
"""
import socket
import ssl
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import logging


class SSLCheckError(Exception):
    """证书检查错误基类"""

    message = "SSL check failed"

    def __init__(self, domain: str, detail: Optional[str] = None):
        """
        Args:
            domain: 被检查的域名
            detail: 底层错误描述
        """
        self.domain = domain
        self.detail = detail
        super().__init__(detail or self.message.format(domain=domain))


class ContextInitError(SSLCheckError):
    """TLS上下文无法创建"""
    message = "Error creating SSL context"


class HandshakeObjectError(SSLCheckError):
    """TLS会话对象无法创建"""
    message = "Error getting SSL object"


class ConnectError(SSLCheckError):
    """TCP连接或TLS握手失败"""
    message = "Error connecting to {domain}"


class NoCertificateError(SSLCheckError):
    """握手完成但对端未提供证书"""
    message = "No certificate found for {domain}"


class ExpiryParseError(SSLCheckError):
    """无法解析证书过期时间"""
    message = "Could not calculate certificate expiration"


class CertificateExpiredError(ExpiryParseError):
    """证书已过期，与解析失败同样处理"""


class CheckErrorHandler:
    """检查错误处理器"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def describe(self, error: SSLCheckError) -> str:
        """
        获取面向用户的错误信息

        Args:
            error: 检查错误

        Returns:
            str: 输出到标准错误的一行信息
        """
        return error.message.format(domain=error.domain)

    def handle_check_error(self, domain: str, error: SSLCheckError) -> Dict[str, Any]:
        """
        处理检查错误

        Args:
            domain: 域名
            error: 检查错误

        Returns:
            Dict[str, Any]: 错误处理结果
        """
        cause = error.__cause__
        error_info = {
            'domain': domain,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'cause_type': type(cause).__name__ if cause is not None else None,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'message': self.describe(error),
            'suggested_action': self._get_suggested_action(error)
        }

        self.logger.info(
            f"域名 {domain} 检查失败 ({error_info['error_type']}): {error_info['error_message']}"
        )

        return error_info

    def _get_suggested_action(self, error: SSLCheckError) -> str:
        """
        获取错误的建议处理方案

        Args:
            error: 检查错误

        Returns:
            str: 建议的处理方案
        """
        cause = error.__cause__

        if isinstance(error, CertificateExpiredError):
            return "证书已过期，需要续期"
        elif isinstance(error, ExpiryParseError):
            return "证书过期时间无法解析，检查证书编码"
        elif isinstance(error, NoCertificateError):
            return "服务器未提供证书，检查是否使用了匿名加密套件"
        elif isinstance(error, (ContextInitError, HandshakeObjectError)):
            return "检查本地OpenSSL环境"
        elif isinstance(cause, socket.timeout):
            return "检查网络连接"
        elif isinstance(cause, socket.gaierror):
            return "检查域名是否正确，DNS服务器是否可用，端口是否有效"
        elif isinstance(cause, ConnectionRefusedError):
            return "检查目标服务器是否运行，端口是否正确"
        elif isinstance(cause, ssl.SSLError):
            return "SSL握手失败，检查SSL/TLS版本兼容性"
        else:
            return "检查网络连接和服务器状态"
