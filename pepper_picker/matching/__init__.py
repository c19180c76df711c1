"""
Matching engine.

Responsibilities:
- Score catalog items against user preferences (strict and soft-only scorers).
- Derive human-readable match reasons.
- Rank survivors, assign match tiers and return structured results.
"""
