from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from page_helper.utils.config_loader import load_config, safe_cfg_get
from page_helper.utils.logger import get_logger


def _build_options(browser: str, headless: bool):
    if browser == "chrome":
        options = ChromeOptions()
        options.add_argument("--start-maximized")
        if headless:
            options.add_argument("--headless=new")
        return options

    if browser == "edge":
        options = EdgeOptions()
        options.add_argument("--start-maximized")
        if headless:
            options.add_argument("--headless=new")
        return options

    if browser == "firefox":
        options = FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return options

    raise ValueError(f"Unsupported browser: {browser}")


def create_driver(browser: str | None = None, headless: bool | None = None, remote_url: str | None = None):
    """中文：根据参数或配置创建浏览器驱动。
    参数:
        browser: 浏览器类型，chrome、edge、firefox，未传则读取 project.browser。
        headless: 是否无头运行，未传则读取 project.headless。
        remote_url: Selenium Grid 地址，未传则读取 project.remote_url；为空时启动本地浏览器。
    """

    if browser is None or headless is None or remote_url is None:
        try:
            cfg = load_config()
        except FileNotFoundError:
            cfg = {}
        if browser is None:
            browser = safe_cfg_get(cfg, ["project", "browser"], "chrome")
        if headless is None:
            headless = bool(safe_cfg_get(cfg, ["project", "headless"], False))
        if remote_url is None:
            remote_url = safe_cfg_get(cfg, ["project", "remote_url"])

    browser = browser.lower()
    options = _build_options(browser, headless)
    get_logger().info(f"[DRIVER] create browser={browser} headless={headless} remote={remote_url or '-'}")

    if remote_url:
        return webdriver.Remote(command_executor=remote_url, options=options)
    if browser == "chrome":
        return webdriver.Chrome(options=options)
    if browser == "edge":
        return webdriver.Edge(options=options)
    return webdriver.Firefox(options=options)
