"""HR policy knowledge base.

The knowledge base is read once at startup and shared by every request. It
is a frozen model with no reload path, so handlers may read it concurrently.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from hr_assistant.core.errors import HRAssistantError

logger = logging.getLogger(__name__)


class KnowledgeBaseError(HRAssistantError):
    """The policy document is missing or unreadable."""


class KnowledgeBase(BaseModel):
    """Topic -> policy mapping embedded verbatim in every generation prompt."""

    model_config = ConfigDict(frozen=True)

    policies: Dict[str, Any] = Field(..., description="Parsed policy document")
    source: str = Field(default="<memory>", description="Where the document was loaded from")

    @property
    def topics(self) -> list[str]:
        return list(self.policies.keys())

    def to_prompt_text(self) -> str:
        """Render the document exactly as it is embedded in the system prompt."""
        return json.dumps(self.policies, indent=2, ensure_ascii=False)


def load_knowledge_base(path: Union[str, Path]) -> KnowledgeBase:
    """Load the policy document from a JSON file.

    Raises:
        KnowledgeBaseError: If the file is missing, not valid JSON, or not an object
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise KnowledgeBaseError(f"Cannot read knowledge base at {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in knowledge base {path}: {e}") from e

    if not isinstance(data, dict):
        raise KnowledgeBaseError(
            f"Knowledge base {path} must be a JSON object, got {type(data).__name__}"
        )

    kb = KnowledgeBase(policies=data, source=str(path))
    logger.info("Loaded knowledge base from %s (%d topics)", path, len(kb.topics))
    return kb
