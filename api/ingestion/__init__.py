"""
Bulk import of seaart search results and IPFS mirroring of stored artworks.
"""
