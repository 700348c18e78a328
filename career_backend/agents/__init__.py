"""
AI components for the role recommendation backend.

1. Role Recommendation (Single-Shot LLM Workflow)
   - Uses Gemini through the Google Gen AI SDK (google-genai)
   - NOT an agent with tools - one prompt, one bounded call
   - Prompts and result types: career_backend/agents/recommendation/
   - Pipeline: career_backend/services/recommendation_service.py
"""
