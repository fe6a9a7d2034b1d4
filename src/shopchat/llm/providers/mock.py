"""Canned-reply completion client for demos.

Answers from a fixed table keyed on shop-management keywords after an
artificial delay. No network access, no configuration.
"""

import asyncio

from ..base import CompletionClient

DEFAULT_DELAY = 1.0

# (keywords, reply); the first group with a keyword in the prompt wins
CANNED_REPLIES: list[tuple[tuple[str, ...], str]] = [
    (
        ("inventory", "stock"),
        "I recommend implementing a just-in-time inventory system to reduce storage costs "
        "while ensuring you don't run out of popular items. You can use the Inventory "
        "Management module in the Shop CRM to set up automatic reorder points based on "
        "historical sales data.",
    ),
    (
        ("sales", "revenue"),
        "Based on your recent sales data, I notice that accessories have a higher profit "
        "margin than main products. Consider creating bundle deals that pair main products "
        "with accessories to increase your average order value. You can track the "
        "performance of these bundles in the Sales Analytics dashboard.",
    ),
    (
        ("customer", "client"),
        "Customer retention is often more cost-effective than acquisition. Consider "
        "implementing a loyalty program that rewards repeat purchases. The Shop CRM can "
        "help you identify your most valuable customers so you can target them with "
        "special offers.",
    ),
    (
        ("employee", "staff"),
        "To improve employee productivity, consider implementing performance metrics tied "
        "to incentives. You can use the Employee Management module to track key "
        "performance indicators and automatically calculate bonuses based on sales "
        "targets or customer satisfaction scores.",
    ),
    (
        ("marketing", "advertis"),
        "For small retail shops, localized marketing often yields the highest return on "
        "investment. Consider partnering with nearby complementary businesses for "
        "cross-promotions, or setting up targeted social media ads with a 3-5 mile radius "
        "around your store location.",
    ),
    (
        ("cost", "expense"),
        "I've analyzed your expense patterns, and I noticed your packaging costs are "
        "higher than industry benchmarks. Consider sourcing from alternative suppliers or "
        "buying in bulk to negotiate better rates. You might also explore eco-friendly "
        "options which can be both cost-effective and appealing to environmentally "
        "conscious customers.",
    ),
]

DEFAULT_REPLY = (
    "I'm here to help with any aspect of your shop management! I can assist with "
    "inventory optimization, sales strategies, customer relationship management, "
    "employee scheduling, marketing ideas, or cost reduction. Just let me know what "
    "specific area you'd like insights on."
)


def canned_reply(prompt: str) -> str:
    """Pick the canned reply for a prompt by keyword."""
    lowered = prompt.lower()
    for keywords, reply in CANNED_REPLIES:
        if any(keyword in lowered for keyword in keywords):
            return reply
    return DEFAULT_REPLY


class MockCompletionClient(CompletionClient):
    """Completion client returning canned shop-management advice."""

    def __init__(self, delay: float = DEFAULT_DELAY):
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self._delay = delay

    @property
    def model(self) -> str:
        return "mock"

    async def generate_response(self, prompt: str) -> str:
        self._debug("info", "LLM", "Using mock responses")
        if self._delay:
            await asyncio.sleep(self._delay)
        return canned_reply(prompt)

    async def close(self) -> None:
        """Nothing to release."""
        pass
