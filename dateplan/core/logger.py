"""표준화된 로거 모듈.

모든 모듈 로거는 `dateplan` 패키지 로거로 전파된다. `configure_logging`이
호출되기 전에는 패키지 로거에 임시 stdout 핸들러를 하나만 붙여 두고,
dictConfig가 적용되면 그 핸들러는 제거된다.
"""

import logging
import sys

PACKAGE_LOGGER_NAME = "dateplan"


def _ensure_package_handler() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers or logging.getLogger().handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """패키지 로거 아래의 로거를 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용).
    """
    _ensure_package_handler()
    return logging.getLogger(name)
