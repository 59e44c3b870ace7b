"""Recipe publish API router.

Endpoints:
- POST /api/save-recipe - Upsert one recipe ({password, recipe}) or a batch
  ({password, recipes: [...]}) into the site's recipe JSON on GitHub
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..deps import get_publisher
from ..exceptions import InternalError, PublishError
from ..schemas import PublishBatchResponse, PublishRequest, PublishSingleResponse
from ..services.publisher import RecipePublisher
from ..settings import settings

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)
logger = logging.getLogger("recipe_publisher.publish")


@router.post("/save-recipe", response_model=Union[PublishBatchResponse, PublishSingleResponse])
@limiter.limit(settings.rate_limit)
def save_recipe(
    request: Request,  # Required for rate limiter
    payload: Optional[PublishRequest] = None,
    publisher: RecipePublisher = Depends(get_publisher),
):
    try:
        return publisher.publish(payload)
    except PublishError:
        raise
    except Exception:
        logger.exception("Unhandled error while publishing recipes")
        raise InternalError()
