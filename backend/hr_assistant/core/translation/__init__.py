"""Translation package.

- gateway.py: TranslationGateway, best-effort calls to the translate API
- normalizer.py: ConversationNormalizer, history into the pivot language
"""

from .gateway import TranslationGateway
from .normalizer import ConversationNormalizer

__all__ = [
    "TranslationGateway",
    "ConversationNormalizer",
]
