"""
Feature modules.

Each feature owns its schemas, services and errors:
- gpx: GPX ingestion and route metrics
"""
