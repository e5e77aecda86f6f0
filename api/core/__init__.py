"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses: DB pool wiring,
env settings, the error taxonomy and the clients for the upstream services
(seaart.ai search, nft.storage). Feature SQL and business logic live in the
feature packages (`artworks/`, `ingestion/`).
"""
