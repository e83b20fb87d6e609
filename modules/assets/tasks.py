"""
Assets Celery tasks.
"""
import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(name='modules.assets.tasks.cleanup_asset_image', ignore_result=True)
def cleanup_asset_image(image_url: str) -> bool:
    """Remove an asset image that is no longer referenced. Never raises."""
    from shared.storage import default_storage

    key = default_storage.key_from_url(image_url)
    if key is None:
        logger.warning(f"Skipping image cleanup, not a managed URL: {image_url}")
        return False

    deleted = default_storage.delete_file(key)
    if deleted:
        logger.info(f"Deleted asset image {key}")
    return deleted
