from __future__ import annotations

GREETING_TEMPLATE = "Hello, {name}! You've been greeted from Python!"


def greet(name: str) -> str:
    return GREETING_TEMPLATE.format(name=name)
