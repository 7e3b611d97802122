"""
测试公共夹具
"""
import pytest
from datetime import datetime, timezone, timedelta

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from sslcheck.models import PeerCertificate


def make_certificate(not_after: datetime, common_name: str = "localhost"):
    """生成自签名证书，返回 (证书, 私钥)"""
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_after - timedelta(days=365))
        .not_valid_after(not_after)
        .sign(key, hashes.SHA256())
    )
    return cert, key


def to_peer_certificate(cert) -> PeerCertificate:
    return PeerCertificate(der=cert.public_bytes(serialization.Encoding.DER))


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def cert_factory(tmp_path):
    """生成证书并写入PEM文件，返回 (PeerCertificate, 证书路径, 私钥路径)"""
    def factory(not_after: datetime):
        cert, key = make_certificate(not_after)
        cert_path = tmp_path / "cert.pem"
        key_path = tmp_path / "key.pem"
        cert_path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
        key_path.write_bytes(key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption()
        ))
        return to_peer_certificate(cert), str(cert_path), str(key_path)
    return factory
