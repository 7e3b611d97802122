"""
TLS连接服务
"""
import ssl
import socket
import logging

from ..interfaces import ConnectorInterface
from ..models import ConnectionTarget, PeerCertificate
from .error_handler import (
    ContextInitError,
    HandshakeObjectError,
    ConnectError,
    NoCertificateError,
)


def create_client_context() -> ssl.SSLContext:
    """
    创建TLS客户端上下文

    不校验证书链和主机名，过期或自签名证书同样可以读取。

    Returns:
        ssl.SSLContext: 客户端上下文

    Raises:
        ContextInitError: 上下文创建失败
    """
    try:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    except (ssl.SSLError, ValueError, OSError) as e:
        raise ContextInitError("", str(e)) from e
    return context


class Connector(ConnectorInterface):
    """TLS连接器实现"""

    def __init__(self, context: ssl.SSLContext):
        """
        初始化连接器

        Args:
            context: 调用方持有的TLS客户端上下文
        """
        self.context = context
        self.logger = logging.getLogger(__name__)

    def fetch_certificate(self, target: ConnectionTarget) -> PeerCertificate:
        """
        连接目标并获取叶子证书

        只尝试一次，不设置超时。SNI使用原始域名。

        Args:
            target: 连接目标

        Returns:
            PeerCertificate: 对端证书

        Raises:
            HandshakeObjectError: TLS会话对象创建失败
            ConnectError: 连接或握手失败
            NoCertificateError: 对端未提供证书
        """
        host = target.host
        self.logger.debug(f"连接 {target.address}")

        try:
            sock = socket.create_connection((host, target.port))
        except (OSError, UnicodeError) as e:
            raise ConnectError(host, str(e)) from e

        with sock:
            try:
                ssock = self.context.wrap_socket(
                    sock, server_hostname=host, do_handshake_on_connect=False
                )
            except (ssl.SSLError, ValueError, TypeError) as e:
                raise HandshakeObjectError(host, str(e)) from e

            with ssock:
                try:
                    ssock.do_handshake()
                except OSError as e:
                    raise ConnectError(host, str(e)) from e

                self.logger.debug(f"{target.address} 握手完成: {ssock.version()}")
                der = ssock.getpeercert(binary_form=True)

        if not der:
            raise NoCertificateError(host)

        return PeerCertificate(der=der)
