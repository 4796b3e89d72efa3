"""Tests for the demonstration message producer."""

import pytest

pytestmark = pytest.mark.unit

from lazyreq.messages import expensive_message, COMPUTING_NOTICE, DEFAULT_MESSAGE


def test_expensive_message_returns_default_message(capsys):
    assert expensive_message() == DEFAULT_MESSAGE == "Value must be positive"


def test_expensive_message_prints_notice_each_call(capsys):
    """Each evaluation prints the notice once."""
    expensive_message()
    expensive_message()
    out = capsys.readouterr().out
    assert out.count(COMPUTING_NOTICE) == 2
