"""
Data ingestion package for the song recommendation service.

Responsibilities:
- Download the Spotify songs dataset (TidyTuesday 2020-01-21).
- Normalize it into the canonical song schema.
- Persist the processed dataset locally and load it as song records.
"""
