from fastapi import APIRouter, Depends, Request, status

from app.api.dependencies import UnitOfWork, get_uow
from app.api.openapi_responses import DATABASE_ERROR, RATE_LIMITED, error_responses
from app.api.schemas.projects import ProjectResponse
from app.core.errors import DATABASE_ERROR_MESSAGE, build_http_error
from app.core.rate_limit import CONTENT_RATE_LIMIT, limit, rate_limit_ip_key
from app.services.errors import ContentStoreError

router = APIRouter()


@router.get(
    "",
    summary="List projects",
    description="List all projects newest first.",
    response_model=list[ProjectResponse],
    responses=error_responses(RATE_LIMITED, DATABASE_ERROR),
)
@limit(CONTENT_RATE_LIMIT, key_func=rate_limit_ip_key)
async def list_projects(
    request: Request,
    uow: UnitOfWork = Depends(get_uow),
) -> list[ProjectResponse]:
    """List all projects."""
    try:
        projects = await uow.project_service.list_projects()
    except ContentStoreError as exc:
        raise build_http_error(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=DATABASE_ERROR_MESSAGE,
        ) from exc
    return [ProjectResponse.model_validate(project) for project in projects]
