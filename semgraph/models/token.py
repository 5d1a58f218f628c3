#------------------------------------------------------------------------------
# token.py
#
# Token identity used as the vertex key of every SemanticGraph.
#
# Author: Theodore Mui
# Date: 2025-09-02
#------------------------------------------------------------------------------

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field


class IndexedToken(BaseModel):
    """A word occurrence inside a numbered sentence.

    Two tokens are the same vertex iff their ``(sentence_index, position)``
    keys match; every other attribute is carried along but ignored by
    equality and hashing.
    """

    sentence_index: int = Field(description="Index of the sentence the token belongs to", default=0)
    position: int = Field(description="Position of the token within its sentence (1-based)")
    word: str = Field(description="Surface form of the token", default="")
    lemma: str = Field(description="Lemma of the token", default="")
    tag: str = Field(description="Part-of-speech tag", default="")
    value: str = Field(description="Display value, usually the surface form", default="")
    projected_category: Optional[str] = Field(
        description="Category of the maximal constituent headed by this token", default=None
    )
    attributes: Dict[str, Any] = Field(description="Any further linguistic attributes", default_factory=dict)

    def key(self) -> Tuple[int, int]:
        return (self.sentence_index, self.position)

    def copy_with(
        self, position: Optional[int] = None, sentence_index: Optional[int] = None
    ) -> "IndexedToken":
        """Return a new token with a rewritten key and all other attributes copied."""
        update: Dict[str, Any] = {}
        if position is not None:
            update["position"] = position
        if sentence_index is not None:
            update["sentence_index"] = sentence_index
        return self.model_copy(update=update, deep=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedToken):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        return f"{self.word or self.value}-{self.position}"
