"""
超时和时间配置模块
所有等待均为毫秒, 可通过同名环境变量覆盖
"""

from config.settings import get_int_env

# --- 点击 ---
CLICK_TIMEOUT_MS = get_int_env("CLICK_TIMEOUT_MS", 3000)

# --- 元素查找 ---
# 推理开关 aria-checked 读取等快速检测
SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS = get_int_env("SELECTOR_EXISTENCE_CHECK_TIMEOUT_MS", 500)
# 候选选择器中首个选择器的可见性等待
SELECTOR_VISIBILITY_TIMEOUT_MS = get_int_env("SELECTOR_VISIBILITY_TIMEOUT_MS", 5000)
# 模型下拉菜单 (Radix portal) 出现
MODEL_DROPDOWN_WAIT_TIMEOUT_MS = get_int_env("MODEL_DROPDOWN_WAIT_TIMEOUT_MS", 3000)

# --- 点击后的 UI 稳定等待 ---
MORE_MENU_SETTLE_MS = get_int_env("MORE_MENU_SETTLE_MS", 1500)
MODEL_MENU_OPEN_SETTLE_MS = get_int_env("MODEL_MENU_OPEN_SETTLE_MS", 1000)
MODEL_SELECTION_SETTLE_MS = get_int_env("MODEL_SELECTION_SETTLE_MS", 1000)
REASONING_TOGGLE_SETTLE_MS = get_int_env("REASONING_TOGGLE_SETTLE_MS", 500)
