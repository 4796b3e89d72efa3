"""Message producers used by the demonstration runner."""

import logging

logger = logging.getLogger(__name__)

COMPUTING_NOTICE = "Computing error message..."
DEFAULT_MESSAGE = "Value must be positive"


def expensive_message() -> str:
    """Simulate an expensive failure message.

    Prints COMPUTING_NOTICE to stdout every time it runs, which makes it
    visible whether a validator built its message or not.
    """
    print(COMPUTING_NOTICE)
    logger.debug("expensive_message() evaluated")
    return DEFAULT_MESSAGE
