class JsMixin:
    """JavaScript 交互混入类，提供脚本执行能力。
    JavaScript interaction mixin providing script execution.
    """

    def execute_js(self, script, *args):
        """执行自定义 JavaScript 并返回结果。

            script: JavaScript 脚本字符串。
            *args: 传递给脚本的参数。
        """

        self._log.debug(f"[EXECUTE_JS] {self._page_name} script={script.strip()[:80]}")
        return self.__driver.execute_script(script, *args)

    def scroll_into_view(self, target):
        """中文：滚动页面使元素进入可视区域。
        参数:
            target: 元素名称、定位器元组或 WebElement。
        """

        self._log.debug(f"[SCROLL_INTO_VIEW] {self._describe(target)}")
        element = self._find(target)
        return self.execute_js("arguments[0].scrollIntoView();", element)
