import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    messages = []
    logger.enable("fasim")
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("fasim")
