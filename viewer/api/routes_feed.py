"""Feed aggregation endpoints for the Reddit Media Viewer API."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from viewer.api.dependencies import get_aggregation_controller, get_status_reporter
from viewer.feed.aggregator import AggregationController, RunRequest
from viewer.feed.render import RenderBuffer
from viewer.status import StatusReporter

router = APIRouter(prefix="/api/feed", tags=["feed"])
limiter = Limiter(key_func=get_remote_address)


@router.post("/run")
@limiter.limit("60/minute")
async def run_feed(
    request: Request,
    body: RunRequest,
    controller: AggregationController = Depends(get_aggregation_controller),
    status: StatusReporter = Depends(get_status_reporter),
):
    """
    Fetch, merge and classify posts for the submitted viewer state.

    This endpoint:
    1. Validates credentials and subreddit input
    2. Fetches each subreddit in the order given (one token per subreddit)
    3. Splits the merged posts into media tiles and list entries

    Returns:
        JSON response with:
            - status: The status message after the run
            - media: Media tiles in fetch order
            - entries: Non-media list entries in fetch order

        400 with only ``status`` when required input is missing; the page
        must keep its previous render in that case.
    """
    sink = RenderBuffer()
    posts = await controller.run(body, sink)

    if posts is None:
        return JSONResponse(status_code=400, content={"status": status.current.model_dump()})

    return {"status": status.current.model_dump(), **sink.to_payload()}
