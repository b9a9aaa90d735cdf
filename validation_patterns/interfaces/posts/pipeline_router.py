"""
FastAPI router for the pipeline behavior validation group.

Routes only translate between HTTP and application requests and send
them through the mediator. Validation happens inside the mediator's
ValidationBehavior; its failures are mapped to responses by the
global exception handler.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from validation_patterns.application.cancellation import CancellationToken
from validation_patterns.application.mediator import Mediator
from validation_patterns.application.posts.dtos import (
    CreatePostCommand,
    GetPostsQuery,
    PostNotFound,
    PostUpdated,
    UpdatePostCommand,
)
from validation_patterns.domain.posts.errors import PostNotFoundError
from validation_patterns.interfaces.dependencies import (
    get_cancellation_token,
    get_exception_handler,
    get_mediator,
)
from validation_patterns.interfaces.posts.schemas import (
    CreatePostRequest,
    CreatePostResponse,
    GetPostsResponse,
    PostItem,
    UpdatePostRequest,
    UpdatePostResponse,
)
from validation_patterns.shared.errors.handlers import GlobalExceptionHandler
from validation_patterns.shared.errors.problem_details import ProblemDetails

router = APIRouter(prefix="/pipeline-behavior-posts", tags=["PipelineValidation"])


@router.get(
    "/",
    response_model=GetPostsResponse,
    summary="Get all posts",
)
async def get_posts(
    mediator: Mediator = Depends(get_mediator),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> GetPostsResponse:
    """Return every post, wrapped in a ``posts`` field."""
    results = await mediator.send(GetPostsQuery(), cancellation)
    return GetPostsResponse(
        posts=[PostItem(id=r.id, title=r.title, content=r.content) for r in results]
    )


@router.post(
    "/",
    response_model=CreatePostResponse,
    responses={400: {"model": ProblemDetails}},
    summary="Create a new post",
)
async def create_post(
    payload: CreatePostRequest,
    mediator: Mediator = Depends(get_mediator),
    cancellation: CancellationToken = Depends(get_cancellation_token),
) -> CreatePostResponse:
    """Create a post and return its identifier."""
    result = await mediator.send(
        CreatePostCommand(title=payload.title, content=payload.content), cancellation
    )
    return CreatePostResponse(id=result.id)


@router.put(
    "/",
    response_model=UpdatePostResponse,
    responses={400: {"model": ProblemDetails}, 404: {"model": ProblemDetails}},
    summary="Update an existing post",
)
async def update_post(
    payload: UpdatePostRequest,
    request: Request,
    mediator: Mediator = Depends(get_mediator),
    cancellation: CancellationToken = Depends(get_cancellation_token),
    error_handler: GlobalExceptionHandler = Depends(get_exception_handler),
) -> UpdatePostResponse | Response:
    """Overwrite the title and content of a post."""
    result = await mediator.send(
        UpdatePostCommand(id=payload.id, title=payload.title, content=payload.content),
        cancellation,
    )
    match result:
        case PostUpdated():
            return UpdatePostResponse()
        case PostNotFound(post_id=post_id):
            return error_handler.to_response(request, PostNotFoundError(post_id))
