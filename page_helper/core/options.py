from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from selenium.webdriver.common.by import By

from page_helper.utils.config_loader import load_config, safe_cfg_get
from page_helper.utils.locator_loader import to_selenium_locator
from page_helper.utils.logger import get_logger


# document 已加载、Angular / AngularJS 无挂起任务、jQuery 无活动请求
STABILIZATION_SCRIPT = """
if (document.readyState !== 'complete') { return false; }
if (window.jQuery && window.jQuery.active > 0) { return false; }
if (window.getAllAngularTestabilities) {
    var testabilities = window.getAllAngularTestabilities();
    for (var i = 0; i < testabilities.length; i++) {
        if (!testabilities[i].isStable()) { return false; }
    }
}
if (window.angular && window.angular.element) {
    var root = document.querySelector('[ng-app], [data-ng-app], .ng-scope') || document.body;
    var injector = window.angular.element(root).injector();
    if (injector) {
        var http = injector.get('$http');
        if (http.pendingRequests.length > 0) { return false; }
    }
}
return true;
"""


@dataclass(frozen=True)
class PageOptions:
    """中文：页面辅助方法的可配置项。
    English: Tunables for the page helper methods.

    All timeouts are in seconds, as everywhere in Selenium. Locator fields
    accept (By, value) tuples or {"by": ..., "value": ...} dicts.

    clear_focus 默认点击视口 clear_focus_point（左上角）。如果该位置是链接或按钮
    （例如 logo），请改用 clear_focus_point 指向空白区域，或设置 clear_focus_locator
    指向一个点击无副作用的元素。
    """

    page_open_marker: tuple = (By.TAG_NAME, "body")
    modal_locator: tuple = (By.CSS_SELECTOR, ".comp-overlay-message")
    clear_focus_before_click: bool = True
    clear_focus_point: tuple = (0, 0)
    clear_focus_locator: tuple | None = None
    wait_timeout: float = 1.0
    page_open_timeout: float = 10.0
    stabilization_timeout: float = 10.0
    poll_frequency: float = 0.1
    stabilization_script: str = STABILIZATION_SCRIPT
    screenshot_on_failure: bool = False
    screenshot_dir: str = "output/screenshots"

    def __post_init__(self):
        for field_name in ("page_open_marker", "modal_locator", "clear_focus_locator"):
            value = getattr(self, field_name)
            if value is not None:
                object.__setattr__(self, field_name, to_selenium_locator(value))
        for field_name in ("wait_timeout", "page_open_timeout", "stabilization_timeout", "poll_frequency"):
            value = getattr(self, field_name)
            if not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"{field_name} must be a positive number, got {value!r}")
        if len(self.clear_focus_point) != 2:
            raise ValueError(f"clear_focus_point must be (x, y), got {self.clear_focus_point!r}")

    def with_overrides(self, **changes) -> "PageOptions":
        return replace(self, **changes)

    @classmethod
    def from_config(cls, cfg: dict) -> "PageOptions":
        """中文：从 config.yaml 的 page_helper 段构建配置。
        参数:
            cfg: load_config() 返回的配置字典。
        """

        section = safe_cfg_get(cfg, ["page_helper"], {}) or {}
        kwargs = {}

        for key in ("page_open_marker", "modal_locator", "clear_focus_locator"):
            if section.get(key) is not None:
                kwargs[key] = section[key]

        for key in ("wait_timeout", "page_open_timeout", "stabilization_timeout", "poll_frequency"):
            if section.get(key) is not None:
                kwargs[key] = float(section[key])

        for key in ("clear_focus_before_click", "screenshot_on_failure"):
            if section.get(key) is not None:
                kwargs[key] = bool(section[key])

        if section.get("clear_focus_point") is not None:
            x, y = section["clear_focus_point"]
            kwargs["clear_focus_point"] = (int(x), int(y))

        if section.get("stabilization_script"):
            kwargs["stabilization_script"] = str(section["stabilization_script"])

        screenshot_dir = safe_cfg_get(cfg, ["paths", "screenshots"])
        if screenshot_dir:
            project_root = Path(cfg.get("_project_root", "."))
            p = Path(screenshot_dir)
            kwargs["screenshot_dir"] = str(p if p.is_absolute() else project_root / p)

        return cls(**kwargs)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "PageOptions":
        """读取配置文件；文件不存在时使用默认值。"""

        try:
            cfg = load_config(path)
        except FileNotFoundError as e:
            get_logger().debug(f"[OPTIONS] config not found, using defaults: {e}")
            return cls()
        return cls.from_config(cfg)
