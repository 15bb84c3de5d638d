"""
页面内执行的 DOM 脚本

所有脚本以单个对象参数调用 (page.evaluate(script, arg)), 只读取 textContent,
不依赖 Playwright 的伪类选择器, 以便兼容不同的 UI 变体。
"""

# 识别当前模型控件: 优先返回文本匹配模型系列的控件, 其次是 "More" 折叠按钮
DETECT_MODEL_CONTROL_SCRIPT = """
({ modelButtonSelector, controlSelector, familyPattern, moreLabel }) => {
    const family = new RegExp(familyPattern);
    const seen = new Set();
    const controls = [];
    for (const selector of [modelButtonSelector, controlSelector]) {
        for (const el of document.querySelectorAll(selector)) {
            if (!seen.has(el)) {
                seen.add(el);
                controls.push(el);
            }
        }
    }
    let more = null;
    for (const el of controls) {
        const text = (el.textContent || '').trim();
        if (!text) continue;
        if (text === moreLabel) {
            more = more || text;
            continue;
        }
        if (family.test(text)) {
            return { text, is_more_affordance: false };
        }
    }
    return more ? { text: more, is_more_affordance: true } : null;
}
"""

# 点击第一个文本匹配的控件 (exact=true 时要求全文相等, 否则为包含匹配)
CLICK_CONTROL_BY_TEXT_SCRIPT = """
({ selector, text, exact }) => {
    for (const el of document.querySelectorAll(selector)) {
        const content = (el.textContent || '').trim();
        if (exact ? content === text : content.includes(text)) {
            el.click();
            return true;
        }
    }
    return false;
}
"""

# 全文档扫描: 选择包含目标文本的最内层可见元素,
# 点击其最近的菜单项祖先 (若无则点击元素本身)
CLICK_ELEMENT_BY_TEXT_SCRIPT = """
({ text, optionSelector }) => {
    const skipped = new Set(['SCRIPT', 'STYLE', 'NOSCRIPT', 'TEMPLATE', 'HEAD', 'HTML', 'BODY']);
    const isVisible = (el) => {
        const style = window.getComputedStyle(el);
        if (style.display === 'none' || style.visibility === 'hidden') return false;
        const rect = el.getBoundingClientRect();
        return rect.width > 0 && rect.height > 0;
    };
    if (!document.body) return false;
    const candidates = Array.from(document.body.querySelectorAll('*')).filter(
        (el) => !skipped.has(el.tagName)
            && !el.closest('script, style, noscript, template')
            && (el.textContent || '').includes(text)
            && isVisible(el)
    );
    const innermost = candidates.find(
        (el) => !candidates.some((other) => other !== el && el.contains(other))
    );
    if (!innermost) return false;
    const target = innermost.closest(optionSelector) || innermost;
    target.click();
    return true;
}
"""

# 一次性探测当前 UI 变体的结构
PROBE_UI_CAPABILITIES_SCRIPT = """
({ controlSelector, moreLabel, toggleSelector, portalSelector }) => {
    const texts = Array.from(document.querySelectorAll(controlSelector)).map(
        (el) => (el.textContent || '').trim()
    );
    return {
        has_more_affordance: texts.some((t) => t === moreLabel),
        has_reasoning_toggle: document.querySelector(toggleSelector) !== null,
        dropdown_is_portal: document.querySelector(portalSelector) !== null,
    };
}
"""
