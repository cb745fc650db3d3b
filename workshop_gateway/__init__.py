"""Workshop gateway: a thin backend in front of a hosted LLM API.

This package provides:
- A FastAPI app proxying chat completions to the upstream provider
- Summarizer adapters (remote chat prompt, or a local transformers pipeline)
- A fail-open markdown-to-HTML renderer for display
"""

__version__ = "0.1.0"
