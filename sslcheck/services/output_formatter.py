"""
输出格式化服务
"""
import json
from typing import Optional

from ..interfaces import OutputFormatterInterface
from ..models import ExpiryResult, OutputMode


class OutputFormatter(OutputFormatterInterface):
    """输出格式化实现"""

    def render(self, result: ExpiryResult, mode: OutputMode) -> Optional[str]:
        """
        生成标准输出的一行内容

        Args:
            result: 检查结果
            mode: 输出模式

        Returns:
            Optional[str]: 带换行的输出行，没有标准输出时返回None
        """
        if mode == OutputMode.JSON:
            return self.format_json(result)

        if not result.is_success:
            return None

        if mode == OutputMode.SHORT:
            return f"{result.days}\n"

        return f"Domain: {result.domain} | Days until Certification expires: {result.days}\n"

    def format_json(self, result: ExpiryResult) -> str:
        """JSON格式，失败时days为null"""
        return json.dumps({"domain": result.domain, "days": result.days}, ensure_ascii=False) + "\n"
