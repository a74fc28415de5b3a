import logging
import platform
import sys
from typing import Dict, Optional

# ANSI转义序列颜色代码
COLORS = {
    "DEBUG": "\033[34m",  # 蓝色
    "INFO": "\033[32m",  # 绿色
    "WARNING": "\033[33m",  # 黄色
    "ERROR": "\033[31m",  # 红色
    "CRITICAL": "\033[1;31m",  # 红色加粗
}


# Windows系统启用ANSI支持
if platform.system() == "Windows":
    import ctypes

    kernel32 = ctypes.windll.kernel32
    kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)


class ColoredFormatter(logging.Formatter):
    """
    自定义的日志格式化器,添加颜色支持
    """

    def format(self, record):
        # 获取对应级别的颜色代码
        color = COLORS.get(record.levelname, "")
        # 复制一份记录，避免颜色代码泄漏到其他handler
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}\033[0m"
        # 创建包含文件名和行号的固定宽度字符串
        record.fileloc = f"[{record.filename}:{record.lineno}]"
        return super().format(record)


# 日志格式 - 使用 fileloc 并设置固定宽度
FORMATTER = ColoredFormatter(
    "%(asctime)s | %(levelname)-17s | %(fileloc)-30s | %(message)s"
)

# 日志级别映射
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class Logger:
    _loggers: Dict[str, logging.Logger] = {}

    @staticmethod
    def setup_logger(name: str) -> logging.Logger:
        """
        设置并获取logger
        :param name: logger名称
        :return: logger实例
        """
        from uploads_im.config.config import settings

        level = LOG_LEVELS.get(settings.LOG_LEVEL.lower(), logging.INFO)

        if name in Logger._loggers:
            existing_logger = Logger._loggers[name]
            if existing_logger.level != level:
                existing_logger.setLevel(level)
            return existing_logger

        logger = logging.getLogger(f"uploads_im.{name}")
        logger.setLevel(level)
        logger.propagate = False

        # 添加控制台输出（stderr，避免与命令行输出混在一起）
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(FORMATTER)
        logger.addHandler(console_handler)

        Logger._loggers[name] = logger
        return logger

    @staticmethod
    def get_logger(name: str) -> Optional[logging.Logger]:
        """
        获取已存在的logger
        :param name: logger名称
        :return: logger实例或None
        """
        return Logger._loggers.get(name)

    @staticmethod
    def update_log_levels(log_level: str) -> int:
        """
        更新所有已创建 logger 的日志级别，返回实际变更的数量。
        """
        new_level = LOG_LEVELS.get(log_level.lower(), logging.INFO)

        updated_count = 0
        for logger_instance in Logger._loggers.values():
            if logger_instance.level != new_level:
                logger_instance.setLevel(new_level)
                updated_count += 1
        return updated_count


# 预定义的loggers
def get_upload_logger():
    return Logger.setup_logger("upload")


def get_decoder_logger():
    return Logger.setup_logger("decoder")


def get_client_logger():
    return Logger.setup_logger("client")


def get_main_logger():
    return Logger.setup_logger("main")
