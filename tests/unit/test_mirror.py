"""IPFS mirroring unit tests."""

import pytest

from artworks import operations
from artworks.models import NO_IPFS
from core.errors import NotFoundError, UpstreamError
from ingestion import mirror


async def _create(store, ipfs_image_url=NO_IPFS):
    return await operations.execute(
        operations.Create(
            image="https://cdn/x.png",
            ipfs_image_url=ipfs_image_url,
            width=1,
            height=1,
            hash_id="h1",
        ),
        store,
    )


class TestMirrorArtwork:
    """mirror_artwork tests."""

    @pytest.mark.asyncio
    async def test_uploads_and_records_gateway_url(self, memory_store, monkeypatch):
        """Test the image is uploaded and ipfs_image_url points at the gateway."""
        monkeypatch.setenv("IPFS_GATEWAY_URL", "https://gw.test/ipfs/")
        created = await _create(memory_store)
        uploaded = []

        async def upload(image_url):
            uploaded.append(image_url)
            return "bafycid"

        view = await mirror.mirror_artwork(created.id, store=memory_store, upload=upload)

        assert uploaded == ["https://cdn/x.png"]
        assert view.ipfs_image_url == "https://gw.test/ipfs/bafycid"
        assert memory_store.rows[created.id].ipfs_image_url == "https://gw.test/ipfs/bafycid"

    @pytest.mark.asyncio
    async def test_already_mirrored_is_left_alone(self, memory_store):
        """Test a mirrored row is not uploaded again unless forced."""
        created = await _create(memory_store, ipfs_image_url="https://ipfs.io/ipfs/old")

        async def upload(image_url):
            raise AssertionError("should not upload")

        view = await mirror.mirror_artwork(created.id, store=memory_store, upload=upload)

        assert view.ipfs_image_url == "https://ipfs.io/ipfs/old"

    @pytest.mark.asyncio
    async def test_force_reuploads(self, memory_store):
        """Test force mirrors even when a url is already set."""
        created = await _create(memory_store, ipfs_image_url="https://ipfs.io/ipfs/old")

        async def upload(image_url):
            return "new"

        view = await mirror.mirror_artwork(created.id, store=memory_store, upload=upload, force=True)

        assert view.ipfs_image_url.endswith("/new")

    @pytest.mark.asyncio
    async def test_missing_artwork(self, memory_store):
        """Test mirroring an unknown id is a NotFoundError."""
        with pytest.raises(NotFoundError):
            await mirror.mirror_artwork(9, store=memory_store)

    @pytest.mark.asyncio
    async def test_upload_failure_keeps_sentinel(self, memory_store):
        """Test a failed upload leaves the row unmirrored."""
        created = await _create(memory_store)

        async def upload(image_url):
            raise UpstreamError("IPFS upload failed: 500")

        with pytest.raises(UpstreamError):
            await mirror.mirror_artwork(created.id, store=memory_store, upload=upload)

        assert memory_store.rows[created.id].ipfs_image_url == NO_IPFS
