"""
FastAPI router for the filter validation group.

Each write route is wrapped by the ValidationFilter, which rejects
invalid requests with a validation problem before the route body
runs. Routes call use cases directly; there is no mediator here.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.posts.create_post import CreatePostUseCase
from validation_patterns.application.posts.dtos import (
    CreatePostCommand,
    GetPostsQuery,
    PostNotFound,
    PostUpdated,
    UpdatePostCommand,
)
from validation_patterns.application.posts.get_posts import GetPostsUseCase
from validation_patterns.application.posts.update_post import UpdatePostUseCase
from validation_patterns.interfaces.dependencies import (
    get_cancellation_token,
    get_create_post_use_case,
    get_list_posts_use_case,
    get_update_post_use_case,
    get_validation_filter,
)
from validation_patterns.interfaces.posts.schemas import (
    CreatePostRequest,
    PostItem,
    UpdatePostRequest,
)
from validation_patterns.shared.errors.problem_details import (
    ProblemDetails,
    ProblemJSONResponse,
    problem_body,
)

router = APIRouter(prefix="/filter-posts", tags=["FilterValidation"])

validation = get_validation_filter()


@router.get(
    "/",
    response_model=list[PostItem],
    summary="Get all posts",
)
async def get_posts(
    use_case: GetPostsUseCase = Depends(get_list_posts_use_case),
) -> list[PostItem]:
    """Return every post."""
    return [
        PostItem(id=p.id, title=p.title, content=p.content)
        for p in use_case.execute(GetPostsQuery())
    ]


@router.post(
    "/",
    response_model=UUID,
    responses={400: {"model": ProblemDetails}},
    summary="Create a new post",
)
@validation.with_request_validation(CreatePostRequest)
async def create_post(
    payload: CreatePostRequest,
    request: Request,
    cancellation: CancellationToken = Depends(get_cancellation_token),
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> UUID:
    """Create a post and return its identifier.

    Validation has already been run by the filter.
    """
    result = use_case.execute(
        CreatePostCommand(title=payload.title, content=payload.content)
    )
    return result.id


@router.put(
    "/",
    response_class=Response,
    responses={
        200: {"description": "Post updated"},
        400: {"model": ProblemDetails},
        404: {"model": ProblemDetails},
    },
    summary="Update an existing post",
)
@validation.with_request_validation(UpdatePostRequest)
async def update_post(
    payload: UpdatePostRequest,
    request: Request,
    cancellation: CancellationToken = Depends(get_cancellation_token),
    use_case: UpdatePostUseCase = Depends(get_update_post_use_case),
) -> Response:
    """Overwrite the title and content of a post."""
    result = use_case.execute(
        UpdatePostCommand(id=payload.id, title=payload.title, content=payload.content)
    )
    match result:
        case PostUpdated():
            return Response(status_code=200)
        case PostNotFound():
            return ProblemJSONResponse(
                status_code=404,
                content=problem_body(request, status_code=404, title="Not Found"),
            )
