"""FastAPI routes for the Reviews domain.

Reads are public; the caller's bearer token, when present, is forwarded to
the users service. Reads and review creation call sibling services, so they
run on the threadpool via ``run_in_domain``.
"""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    CommentRequest,
    CreateReactionRequest,
    CreateReviewRequest,
    IdResponse,
    StatusResponse,
    UpdateReviewRequest,
)
from reviews.domain import reviews
from reviews.review.comments import CreateComment, EditComment, RemoveComment
from reviews.review.editing import UpdateReview
from reviews.review.queries import ReviewQuery, get_review, get_reviews
from reviews.review.reactions import CreateCommentReaction, CreateReaction, RemoveCommentReaction, RemoveReaction
from reviews.review.removal import RemoveReview
from reviews.review.submission import CreateReview
from shared.auth import UserAuth, authenticated_user, optional_user
from shared.concurrency import run_in_domain

review_router = APIRouter(prefix="/reviews", tags=["reviews"])

Caller = Annotated[UserAuth, Depends(authenticated_user)]
MaybeCaller = Annotated[UserAuth | None, Depends(optional_user)]


def _authorization(user: UserAuth | None) -> str:
    return user.authorization if user else ""


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
@review_router.get("")
async def list_reviews(query: Annotated[ReviewQuery, Query()], user: MaybeCaller) -> dict:
    return await run_in_domain(reviews, get_reviews, query, _authorization(user))


@review_router.get("/{review_id}")
async def get_single_review(review_id: str, user: MaybeCaller) -> dict:
    return await run_in_domain(reviews, get_review, review_id, _authorization(user))


def _create_and_read(command: CreateReview, authorization: str) -> dict:
    review_id = current_domain.process(command, asynchronous=False)
    return get_review(review_id, authorization)


@review_router.post("", status_code=201)
async def create_review(body: CreateReviewRequest, user: Caller) -> dict:
    command = CreateReview(
        product_id=body.product_id,
        user_id=user.id,
        rating=body.rating,
        text=body.text,
        images=json.dumps(body.images) if body.images is not None else None,
        show_on_main=body.show_on_main,
    )
    return await run_in_domain(reviews, _create_and_read, command, user.authorization)


@review_router.put("/{review_id}")
async def update_review(review_id: str, body: UpdateReviewRequest, user: Caller) -> dict:
    command = UpdateReview(
        review_id=review_id,
        rating=body.rating,
        text=body.text,
        images=json.dumps(body.images) if body.images is not None else None,
        show_on_main=body.show_on_main,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return await run_in_domain(reviews, get_review, review_id, user.authorization)


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def remove_review(review_id: str, user: Caller) -> StatusResponse:
    command = RemoveReview(review_id=review_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------
@review_router.post("/{review_id}/reactions", status_code=201, response_model=IdResponse)
async def create_reaction(review_id: str, body: CreateReactionRequest, user: Caller) -> IdResponse:
    command = CreateReaction(review_id=review_id, user_id=user.id, reaction=body.reaction)
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@review_router.delete("/{review_id}/reactions/{reaction_id}", response_model=StatusResponse)
async def remove_reaction(review_id: str, reaction_id: str, user: Caller) -> StatusResponse:
    command = RemoveReaction(
        review_id=review_id,
        reaction_id=reaction_id,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------
@review_router.post("/{review_id}/comments", status_code=201, response_model=IdResponse)
async def create_comment(review_id: str, body: CommentRequest, user: Caller) -> IdResponse:
    command = CreateComment(review_id=review_id, user_id=user.id, text=body.text)
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@review_router.put("/{review_id}/comments/{comment_id}", response_model=StatusResponse)
async def edit_comment(review_id: str, comment_id: str, body: CommentRequest, user: Caller) -> StatusResponse:
    command = EditComment(
        review_id=review_id,
        comment_id=comment_id,
        text=body.text,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@review_router.delete("/{review_id}/comments/{comment_id}", response_model=StatusResponse)
async def remove_comment(review_id: str, comment_id: str, user: Caller) -> StatusResponse:
    command = RemoveComment(review_id=review_id, comment_id=comment_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@review_router.post("/{review_id}/comments/{comment_id}/reactions", status_code=201, response_model=IdResponse)
async def create_comment_reaction(
    review_id: str, comment_id: str, body: CreateReactionRequest, user: Caller
) -> IdResponse:
    command = CreateCommentReaction(
        review_id=review_id,
        comment_id=comment_id,
        user_id=user.id,
        reaction=body.reaction,
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@review_router.delete("/{review_id}/comments/{comment_id}/reactions/{reaction_id}", response_model=StatusResponse)
async def remove_comment_reaction(review_id: str, comment_id: str, reaction_id: str, user: Caller) -> StatusResponse:
    command = RemoveCommentReaction(
        review_id=review_id,
        comment_id=comment_id,
        reaction_id=reaction_id,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
