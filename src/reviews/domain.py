"""Reviews bounded context — product reviews, reactions and comments.

Reviews reference products and users that live in sibling services; reads
enrich stored rows with the remote product and user, fetched concurrently.
"""

import structlog
from protean.domain import Domain

reviews = Domain(name="reviews")

logger = structlog.get_logger(__name__)
