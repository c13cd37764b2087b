#!filepath: tests/base_test/test_logger.py
import pytest
from loguru import logger

from wallclock.utils.logger import Logging


@pytest.fixture
def captured():
    """重新初始化 Logging 后挂一个内存 sink"""
    logs = Logging(log_level="DEBUG")
    messages = []
    logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield logs, messages
    logger.remove()


def test_catch_logs_and_reraises(captured):
    logs, messages = captured

    @logs.catch(msg="boom happened")
    def boom():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        boom()

    assert any("[ERROR] boom: boom happened" in m for m in messages)


def test_catch_logs_inputs_outputs_time(captured):
    logs, messages = captured

    @logs.catch(log_inputs=True, log_outputs=True, log_time=True)
    def add(a, b=0):
        return a + b

    assert add(1, b=2) == 3
    assert any(m.startswith("[CALL] add") for m in messages)
    assert any("[RETURN] add result=3" in m for m in messages)
    assert any(m.startswith("[TIME] add") for m in messages)


def test_file_sink_created(tmp_path):
    log_dir = tmp_path / "logs"
    logs = Logging(log_dir=str(log_dir), log_level="INFO")
    logs.info("hello")
    logger.complete()
    assert log_dir.is_dir()
    logger.remove()
