"""
证书过期计算服务
"""
from datetime import datetime, timezone, timedelta
from typing import Optional
import logging

from cryptography import x509

from ..models import PeerCertificate
from .error_handler import ExpiryParseError, CertificateExpiredError

ONE_DAY = timedelta(days=1)


class ExpiryCalculator:
    """证书过期计算器"""

    def __init__(self, domain: str = ""):
        """
        初始化过期计算器

        Args:
            domain: 证书所属域名，用于错误信息
        """
        self.domain = domain
        self.logger = logging.getLogger(__name__)

    def extract_not_after(self, certificate: PeerCertificate) -> datetime:
        """
        解析证书过期时间

        Args:
            certificate: 对端证书

        Returns:
            datetime: 过期时间（UTC）

        Raises:
            ExpiryParseError: 证书无法解码
        """
        try:
            cert = x509.load_der_x509_certificate(certificate.der)
            return cert.not_valid_after_utc
        except (ValueError, TypeError) as e:
            raise ExpiryParseError(self.domain, str(e)) from e

    def calculate_days_until_expiry(self, expiry_date: datetime,
                                    now: Optional[datetime] = None) -> int:
        """
        计算距离过期的天数

        按完整的24小时计算，不足一天的部分向零截断。

        Args:
            expiry_date: 过期时间，无时区时按UTC处理
            now: 参考时间，默认当前时间

        Returns:
            int: 剩余天数（负数表示已过期）
        """
        if now is None:
            now = datetime.now(timezone.utc)
        if expiry_date.tzinfo is None:
            expiry_date = expiry_date.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        delta = expiry_date - now
        whole_days = abs(delta) // ONE_DAY
        return whole_days if delta >= timedelta(0) else -whole_days

    def days_remaining(self, certificate: PeerCertificate,
                       now: Optional[datetime] = None) -> int:
        """
        计算证书剩余有效天数

        Args:
            certificate: 对端证书
            now: 参考时间，默认当前时间

        Returns:
            int: 剩余天数（非负）

        Raises:
            ExpiryParseError: 过期时间无法解析
            CertificateExpiredError: 证书已过期
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        expiry_date = self.extract_not_after(certificate)
        days = self.calculate_days_until_expiry(expiry_date, now)

        # 已经过了notAfter，即使不足一天也视为失败
        if days < 0 or expiry_date < now:
            raise CertificateExpiredError(
                self.domain, f"证书已于 {expiry_date.isoformat()} 过期"
            )

        self.logger.debug(f"证书过期时间: {expiry_date.isoformat()}, 剩余 {days} 天")
        return days
