"""Sample inputs served to clients that want to try a conversion."""
from __future__ import annotations

from .channels import DocumentKind

WORD_SAMPLE = """# 项目周报

## 本周进展
- 完成需求评审
- 输出接口文档初稿
- 修复登录页面样式问题

负责人: 王一
时间: 10:00

下周计划
1. 联调支付模块
2. 准备发布说明

整体进度符合预期，
风险可控。
"""

EXCEL_SAMPLE = """模块,负责人,进度,备注
产品文档,王一,80%,等待评审
接口联调,李二,60%,"依赖支付,短信服务"
测试用例,张三,40%,
"""

POWERPOINT_SAMPLE = """季度汇报
- 收入同比增长 18%
- 新增客户 120 家

产品路线
1. 上线移动端
2. 接入第三方登录

下一步
- 扩充销售团队
- 优化交付流程
"""

MARKDOWN_SAMPLE = """# 发布说明

## 新功能
- 支持 **Markdown** 导出
- 表格转换为 *CSV*

## 数据

| 模块 | 负责人 |
| --- | --- |
| 产品文档 | 王一 |
| 接口联调 | 李二 |

更多信息见 [文档](https://example.com/docs)。

```python
print("hello")
```
"""

SAMPLES: dict[DocumentKind, str] = {
    DocumentKind.WORD: WORD_SAMPLE,
    DocumentKind.EXCEL: EXCEL_SAMPLE,
    DocumentKind.POWERPOINT: POWERPOINT_SAMPLE,
    DocumentKind.MARKDOWN: MARKDOWN_SAMPLE,
}


def get_sample(kind: DocumentKind | str) -> str | None:
    return SAMPLES.get(DocumentKind(kind))


__all__ = ["SAMPLES", "get_sample"]
