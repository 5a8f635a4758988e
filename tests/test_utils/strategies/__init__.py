from __future__ import annotations

from tests.test_utils.strategies.html import html_strategy
from tests.test_utils.strategies.locator import locator_strategy
from tests.test_utils.strategies.xml import xml_strategy

__all__ = ["html_strategy", "locator_strategy", "xml_strategy"]
