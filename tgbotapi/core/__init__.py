"""Cross-cutting plumbing shared by the codec and the builders.

This package must NEVER import from ``tgbotapi.models`` or ``tgbotapi.methods``.
"""

from tgbotapi.core.logger import BotApiLogger, init_library_logging

__all__ = [
    "BotApiLogger",
    "init_library_logging",
]
