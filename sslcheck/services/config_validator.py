"""
配置验证服务
"""
import os
from typing import Dict, Any, Optional
import logging

from ..models import CheckConfig, ConnectionTarget, OutputMode, MAX_PORT_LENGTH


class ConfigValidator:
    """配置验证器"""

    def __init__(self):
        """初始化配置验证器"""
        self.logger = logging.getLogger(__name__)

        # 可选的环境变量
        self.optional_env_vars = {
            'SSLCHECK_PORT': '默认端口',
            'LOG_LEVEL': '日志级别'
        }

        self.valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    def build_config(self, host: str, port: Optional[str] = None,
                     short_output: bool = False, json_output: bool = False,
                     log_level: Optional[str] = None) -> CheckConfig:
        """
        根据命令行参数和环境变量构造配置

        Args:
            host: 域名
            port: 命令行端口，为None时读取SSLCHECK_PORT
            short_output: 只输出天数
            json_output: JSON输出，优先于short_output
            log_level: 日志级别，为None时读取LOG_LEVEL

        Returns:
            CheckConfig: 运行配置
        """
        if port is None:
            port = os.getenv('SSLCHECK_PORT') or None

        if json_output:
            mode = OutputMode.JSON
        elif short_output:
            mode = OutputMode.SHORT
        else:
            mode = OutputMode.PLAIN

        level = (log_level or os.getenv('LOG_LEVEL') or 'WARNING').upper()
        if level not in self.valid_log_levels:
            self.logger.info(f"无效的日志级别 {level}，使用WARNING")
            level = 'WARNING'

        return CheckConfig(
            target=ConnectionTarget.from_input(host, port),
            output_mode=mode,
            log_level=level
        )

    def validate_config(self, config: CheckConfig) -> Dict[str, Any]:
        """
        验证运行配置

        端口格式问题只作为警告，连接时才会失败。

        Args:
            config: 运行配置

        Returns:
            Dict[str, Any]: 验证结果
        """
        result = {
            'is_valid': True,
            'errors': [],
            'warnings': []
        }

        target = config.target

        if not target.host:
            result['is_valid'] = False
            result['errors'].append("域名不能为空")
        elif target.host != target.host.strip():
            result['warnings'].append(f"域名包含空白字符: {target.host!r}")

        port_validation = self.validate_port(target.port)
        result['warnings'].extend(port_validation['warnings'])

        for warning in result['warnings']:
            self.logger.info(warning)

        return result

    def validate_port(self, port: str) -> Dict[str, Any]:
        """
        验证端口

        Args:
            port: 端口字符串

        Returns:
            Dict[str, Any]: 端口验证结果
        """
        result = {
            'port': port,
            'is_numeric': port.isdigit(),
            'warnings': []
        }

        if len(port) > MAX_PORT_LENGTH:
            result['warnings'].append(f"端口 {port} 超过 {MAX_PORT_LENGTH} 个字符")
        elif not result['is_numeric']:
            result['warnings'].append(f"端口 {port} 不是数字，将按服务名解析")
        elif not 1 <= int(port) <= 65535:
            result['warnings'].append(f"端口 {port} 超出范围 1-65535")

        return result
