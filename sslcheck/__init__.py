"""
SSLCHECK - 检查TLS服务器证书的剩余有效天数
"""
__version__ = "1.2.0"
__author__ = "Alexia Michelle <alexia@goldendoglinux.org>"
