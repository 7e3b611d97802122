"""
错误处理服务测试
"""
import pytest
import socket
import ssl

from sslcheck.services.error_handler import (
    CheckErrorHandler,
    SSLCheckError,
    ContextInitError,
    HandshakeObjectError,
    ConnectError,
    NoCertificateError,
    ExpiryParseError,
    CertificateExpiredError,
)


def _raise_from(error, cause):
    """构造带有__cause__的异常"""
    try:
        raise error from cause
    except SSLCheckError as e:
        return e


class TestErrorTaxonomy:
    """错误类型测试类"""

    @pytest.mark.parametrize("error_class", [
        ContextInitError,
        HandshakeObjectError,
        ConnectError,
        NoCertificateError,
        ExpiryParseError,
        CertificateExpiredError,
    ])
    def test_all_errors_are_check_errors(self, error_class):
        assert issubclass(error_class, SSLCheckError)

    def test_expired_is_parse_error(self):
        """已过期与解析失败同样处理"""
        assert issubclass(CertificateExpiredError, ExpiryParseError)

    def test_error_kinds_are_distinct(self):
        assert not issubclass(ConnectError, NoCertificateError)
        assert not issubclass(NoCertificateError, ConnectError)
        assert not issubclass(HandshakeObjectError, ContextInitError)

    def test_error_attributes(self):
        error = ConnectError("example.com", "Connection refused")
        assert error.domain == "example.com"
        assert error.detail == "Connection refused"
        assert str(error) == "Connection refused"

    def test_error_without_detail(self):
        error = NoCertificateError("example.com")
        assert error.detail is None
        assert str(error) == "No certificate found for example.com"


class TestCheckErrorHandler:
    """检查错误处理器测试类"""

    def setup_method(self):
        """测试前准备"""
        self.handler = CheckErrorHandler()

    @pytest.mark.parametrize("error, expected", [
        (ContextInitError(""), "Error creating SSL context"),
        (HandshakeObjectError("example.com"), "Error getting SSL object"),
        (ConnectError("example.com"), "Error connecting to example.com"),
        (NoCertificateError("example.com"), "No certificate found for example.com"),
        (ExpiryParseError("example.com"), "Could not calculate certificate expiration"),
        (CertificateExpiredError("example.com"), "Could not calculate certificate expiration"),
    ])
    def test_describe(self, error, expected):
        assert self.handler.describe(error) == expected

    def test_handle_check_error(self):
        """测试错误处理结果"""
        error = _raise_from(
            ConnectError("example.com", "Connection refused"),
            ConnectionRefusedError("Connection refused")
        )

        error_info = self.handler.handle_check_error("example.com", error)

        assert error_info['domain'] == "example.com"
        assert error_info['error_type'] == "ConnectError"
        assert error_info['error_message'] == "Connection refused"
        assert error_info['cause_type'] == "ConnectionRefusedError"
        assert error_info['message'] == "Error connecting to example.com"
        assert 'timestamp' in error_info
        assert "端口" in error_info['suggested_action']

    def test_handle_check_error_without_cause(self):
        error_info = self.handler.handle_check_error("example.com", NoCertificateError("example.com"))

        assert error_info['cause_type'] is None
        assert "匿名" in error_info['suggested_action']

    def test_suggested_action_by_cause(self):
        """测试根据底层错误给出建议"""
        dns_error = _raise_from(ConnectError("bad.invalid"), socket.gaierror("unknown"))
        tls_error = _raise_from(ConnectError("example.com"), ssl.SSLError("handshake failure"))
        timeout_error = _raise_from(ConnectError("example.com"), socket.timeout("timed out"))

        assert "DNS" in self.handler._get_suggested_action(dns_error)
        assert "SSL" in self.handler._get_suggested_action(tls_error)
        assert "网络" in self.handler._get_suggested_action(timeout_error)

    def test_suggested_action_expired(self):
        action = self.handler._get_suggested_action(CertificateExpiredError("example.com"))
        assert "过期" in action
