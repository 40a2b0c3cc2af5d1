from fastapi import APIRouter, Depends, Query, Request, status

from app.api.dependencies import UnitOfWork, get_uow
from app.api.openapi_responses import (
    DATABASE_ERROR,
    RATE_LIMITED,
    ErrorExample,
    error_responses,
    validation_error,
)
from app.api.schemas.posts import PostResponse
from app.core.errors import DATABASE_ERROR_MESSAGE, POST_NOT_FOUND_MESSAGE, build_http_error
from app.core.rate_limit import CONTENT_RATE_LIMIT, limit, rate_limit_ip_key
from app.db.models.post import PostType
from app.services.errors import ContentStoreError, PostNotFoundError

router = APIRouter()


@router.get(
    "",
    summary="List posts",
    description="List posts newest first, optionally filtered by type.",
    response_model=list[PostResponse],
    responses=error_responses(
        validation_error(
            ["query", "type"], "Input should be 'thinking' or 'doing'", "enum"
        ),
        RATE_LIMITED,
        DATABASE_ERROR,
    ),
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def list_posts(
    request: Request,
    post_type: PostType | None = Query(
        default=None, alias="type", description="Only return posts of this type"
    ),
    uow: UnitOfWork = Depends(get_uow),
) -> list[PostResponse]:
    """List posts, newest-inserted first."""
    try:
        posts = await uow.post_service.list_posts(post_type)
    except ContentStoreError as exc:
        raise build_http_error(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=DATABASE_ERROR_MESSAGE,
        ) from exc
    return [PostResponse.model_validate(post) for post in posts]


@router.get(
    "/{post_id}",
    summary="Get post",
    description="Fetch a single post by id.",
    response_model=PostResponse,
    responses=error_responses(
        ErrorExample(
            status_code=status.HTTP_404_NOT_FOUND,
            error=POST_NOT_FOUND_MESSAGE,
            description="No post with this id",
            example_name="post_not_found",
        ),
        validation_error(
            ["path", "post_id"],
            "Input should be a valid integer, unable to parse string as an integer",
            "int_parsing",
        ),
        RATE_LIMITED,
        DATABASE_ERROR,
    ),
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def get_post(
    request: Request,
    post_id: int,
    uow: UnitOfWork = Depends(get_uow),
) -> PostResponse:
    """Fetch a single post."""
    try:
        post = await uow.post_service.get_post(post_id)
    except PostNotFoundError as exc:
        raise build_http_error(
            status_code=status.HTTP_404_NOT_FOUND,
            error=POST_NOT_FOUND_MESSAGE,
        ) from exc
    except ContentStoreError as exc:
        raise build_http_error(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=DATABASE_ERROR_MESSAGE,
        ) from exc
    return PostResponse.model_validate(post)
