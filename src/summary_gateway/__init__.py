"""
Summary Gateway package.

Provides:
- Gemini-backed summarization with ordered model fallback
- FastAPI endpoint (POST /api/summarize) and a one-shot CLI
"""
