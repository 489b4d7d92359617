"""
Song recommendation engine.

Responsibilities:
- Hold the loaded song catalog as an immutable, swappable snapshot.
- Score every song against the artist and genre hints of a query.
- Rank by score, truncate to the requested limit and project to API output.
"""
