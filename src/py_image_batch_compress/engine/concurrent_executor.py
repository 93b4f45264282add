"""并发执行器模块。

提供固定大小线程池上的扇出执行，每个任务完成后在工作线程内回调。
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Generic, TypeVar

from ..exceptions import ErrorHandler


logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ResultT = TypeVar("ResultT")

# 完成回调：(任务项, 结果, 异常)，结果与异常恰有一个为 None
CompletionCallback = Callable[[ItemT, ResultT | None, Exception | None], None]


class ConcurrentExecutor(Generic[ItemT, ResultT]):
    """通用并发执行器

    任务之间没有数据依赖，完成顺序不保证与输入顺序一致。
    """

    def __init__(self, max_workers: int = 4):
        """初始化并发执行器

        Args:
            max_workers: 最大并发数
        """
        if max_workers <= 0:
            raise ValueError(f"max_workers 必须大于 0，当前值: {max_workers}")
        self.max_workers = max_workers

    def execute_tasks(
        self,
        items: Sequence[ItemT],
        task_function: Callable[[ItemT], ResultT],
        on_complete: CompletionCallback,
    ) -> None:
        """执行并发任务，全部完成后返回

        Args:
            items: 任务项列表
            task_function: 在工作线程中执行的任务函数
            on_complete: 每个任务结束后仍在该工作线程中调用
        """
        if not items:
            return

        workers = min(self.max_workers, len(items))
        logger.debug(f"使用ThreadPoolExecutor: 任务数={len(items)}, 线程数={workers}")

        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="image-worker"
        ) as executor:
            futures = [
                executor.submit(self._run_task, item, task_function, on_complete)
                for item in items
            ]

            # 线程池退出前会等待全部任务，回调中的异常随后抛出
            for future in as_completed(futures):
                future.result()

    @staticmethod
    def _run_task(
        item: ItemT,
        task_function: Callable[[ItemT], ResultT],
        on_complete: CompletionCallback,
    ) -> None:
        """执行单个任务并上报结果"""
        try:
            result = task_function(item)
        except Exception as e:
            ErrorHandler.handle_file_failure(e, str(item), "并发任务处理")
            on_complete(item, None, e)
        else:
            on_complete(item, result, None)
