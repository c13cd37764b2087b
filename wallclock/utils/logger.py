#!filepath: wallclock/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 默认只输出到 stderr
    - 指定 log_dir 时增加按日期切割的文件日志
    - 包含函数级日志装饰器 catch()
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )

        logger.debug("Logger initialized (level={}, dir={})", self.level, self.log_dir)

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = False,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 cli 按 AppConfig 重新初始化）
logs = Logging()
