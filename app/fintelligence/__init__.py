"""
Fintelligence relay backend.

A small FastAPI service that turns bank statements, pasted transaction
text and portfolio snapshots into prompts for an OpenAI chat model and
relays the model's JSON or markdown answer back to the caller.
"""

__version__ = "1.0.0"
