class SequenceMixin:
    """中文：顺序执行混入类。
    English: Sequencing mixin.

    WebDriver commands built ahead of time can otherwise run in the wrong
    order, so composite actions are expressed as a list of zero-argument
    callables and run strictly one after another.
    """

    def run_sequentially(self, actions):
        """中文：按顺序执行动作，遇到第一个异常立即停止并原样抛出。
        参数:
            actions: 无参可调用对象的序列。
        返回:
            每个动作的返回值列表。
        """

        actions = list(actions)
        for index, action in enumerate(actions, start=1):
            if not callable(action):
                raise TypeError(f"run_sequentially step {index} is not callable: {action!r}")

        total = len(actions)
        results = []
        for index, action in enumerate(actions, start=1):
            self._log.debug(f"[SEQUENCE] {self._page_name} step {index}/{total}")
            try:
                results.append(action())
            except Exception as exc:
                self._log.warning(
                    f"[SEQUENCE] {self._page_name} step {index}/{total} failed, "
                    f"{total - index} skipped: {exc!r}"
                )
                self._capture_failure(f"sequence_step{index}", exc)
                raise
        return results
