import logging
from typing import Any

import aioboto3
from botocore.client import Config

logger = logging.getLogger(__name__)


class StorageClient:
    """S3 (or S3-compatible) client for the stitched audio files."""

    def __init__(
        self,
        bucket: str | None,
        region: str | None = None,
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ):
        if not bucket:
            raise ValueError("S3 bucket not configured. Set S3_BUCKET or pass bucket.")
        self.bucket = bucket
        self._session = aioboto3.Session()
        # Unset values fall through to boto's default credential/region chain
        self._client_params: dict[str, Any] = {
            key: value
            for key, value in {
                "region_name": region,
                "endpoint_url": endpoint_url,
                "aws_access_key_id": access_key_id,
                "aws_secret_access_key": secret_access_key,
            }.items()
            if value
        }
        self._client_params["config"] = Config(signature_version="s3v4")

    async def upload_audio_file(self, key: str, audio_data: bytes) -> None:
        """Upload audio data to the bucket."""
        try:
            async with self._session.client("s3", **self._client_params) as s3:
                await s3.put_object(
                    Bucket=self.bucket,
                    Key=key,
                    Body=audio_data,
                    ContentType="audio/mpeg",
                )
        except Exception as e:
            logger.error(f"[S3] Audio upload failed for {key}: {e}")
            raise
        logger.info(f"[S3] Audio upload successful: s3://{self.bucket}/{key}")

    async def get_presigned_download_url(self, key: str, expires_in: int = 3600) -> str:
        """Generate a presigned URL for downloading a file."""
        async with self._session.client("s3", **self._client_params) as s3:
            return await s3.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in,
            )
