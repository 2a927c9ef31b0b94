"""API endpoint for broadcasting a newsletter issue."""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_email_client
from src.api.models import INTERNAL_ERROR_DETAIL
from src.api.newsletters.models import PublishNewsletterRequest
from src.email_client import EmailClient
from src.errors import DeliveryError, PersistenceError, format_error_chain
from src.newsletters import NewsletterIssue, publish_newsletter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/newsletters", tags=["Newsletters"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Publish newsletter",
)
def publish_newsletter_endpoint(
    request: PublishNewsletterRequest,
    email_client: EmailClient = Depends(get_email_client),
) -> Response:
    """Send a newsletter issue to every confirmed subscriber.

    Any delivery failure aborts the broadcast and returns 500.
    """
    start = time.perf_counter()
    logger.info(f"Publish newsletter: title={request.title!r}")

    issue = NewsletterIssue(
        title=request.title,
        html_content=request.content.html,
        text_content=request.content.text,
    )

    try:
        result = publish_newsletter(issue, email_client=email_client)
    except (PersistenceError, DeliveryError) as e:
        logger.error(f"Publish newsletter failed:\n{format_error_chain(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        ) from e

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"Publish newsletter complete: recipients={result.recipients}, elapsed={elapsed_ms:.0f}ms"
    )
    return Response(status_code=status.HTTP_200_OK)
