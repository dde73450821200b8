from polyglot.services.summary.summarizer import Summarizer, parse_summary
from polyglot.services.summary.engine import VertexGeminiEngine

__all__ = ["Summarizer", "parse_summary", "VertexGeminiEngine"]
