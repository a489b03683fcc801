"""
SimilarityOracle backed by a SentenceTransformer embedding model.

Requires the ``embeddings`` extra (``sentence-transformers``).
"""

from typing import Optional

from sentence_transformers import SentenceTransformer

from ..domain.ports import SimilarityOracle
from .similarity import cosine_similarity

DEFAULT_MODEL = "all-mpnet-base-v2"


class SentenceTransformerOracle(SimilarityOracle):
    """
    Encodes the query and the record text with a SentenceTransformer model and
    scores them by cosine similarity.
    """

    def __init__(self, model_name: str = DEFAULT_MODEL, model: Optional[SentenceTransformer] = None):
        """
        Initializes the oracle with a loaded model, or loads ``model_name``.
        """
        self.model = model if model is not None else SentenceTransformer(model_name)

    def similarity(self, query: str, text: str) -> float:
        query_vec, text_vec = self.model.encode([query, text])
        return cosine_similarity(query_vec, text_vec)
