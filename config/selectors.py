"""
CSS选择器配置模块
包含所有用于定位模型选择下拉菜单及推理模式开关的CSS选择器
"""

from typing import List

# --- 模型按钮选择器 ---
# 模型按钮位于右上角, flex 布局, 文本为当前模型名 (需与 "More" 按钮区分)
MODEL_BUTTON_SELECTOR = 'button[class*="flex"][class*="items-center"][class*="gap-2"]'
# 页面上所有可交互控件 (用于扫描模型名称)
INTERACTIVE_CONTROL_SELECTOR = 'button, [role="button"]'

# --- 下拉菜单选择器 ---
# Radix UI 将下拉菜单渲染在 portal 中, 按优先级排序
MODEL_DROPDOWN_SELECTORS: List[str] = [
    # 当前 UI 结构 (Radix popper portal)
    'div[data-radix-popper-content-wrapper] [role="menu"][data-state="open"]',
    "div[data-radix-popper-content-wrapper]",
    # 回退: 非 portal 渲染的菜单
    '[role="menu"][data-state="open"]',
    '[role="listbox"]',
]
# 用于 document.querySelector 的 portal 存在性检测
MODEL_DROPDOWN_PORTAL_SELECTOR = "div[data-radix-popper-content-wrapper]"

# --- 下拉选项选择器 ---
MODEL_OPTION_SELECTORS: List[str] = [
    'div[role="menuitem"]',
    '[role="menuitemradio"]',
    '[role="option"]',
]

# --- 推理模式 (Рассуждение) 相关选择器 ---
REASONING_TOGGLE_SELECTOR = 'button[value="on"][role="switch"]'
REASONING_MENU_ITEM_SELECTOR = 'div[role="menuitem"]:has-text("Рассуждение")'
