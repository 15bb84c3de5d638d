"""
常量配置模块
包含所有固定的常量定义, 如日志器名称、模型系列名称、界面标签等
"""

import re
from typing import Tuple

# --- 日志器名称 ---
LOGGER_NAME = "PerplexityModelSelector"

# --- 界面标签 ---
# 折叠模型列表的 "More" 按钮文本
MORE_OPTIONS_LABEL = "More"
# 关闭下拉菜单使用的按键
DROPDOWN_CLOSE_KEY = "Escape"

# --- 模型系列 ---
# 目录中各模型共享的厂商/系列名称, 用于识别模型选择控件
MODEL_FAMILY_NAMES: Tuple[str, ...] = ("Claude", "Gemini", "Sonar", "GPT", "Grok", "Kimi")
MODEL_FAMILY_PATTERN = "(" + "|".join(re.escape(n) for n in MODEL_FAMILY_NAMES) + ")"

# --- 推理模式 ---
# 下拉菜单中提供推理模式开关的模型系列 (小写)
REASONING_TOGGLE_FAMILIES: Tuple[str, ...] = ("claude",)
# 推理模式菜单项的本地化标签
REASONING_MODE_LABELS: Tuple[str, ...] = ("Рассуждение", "Reasoning")
