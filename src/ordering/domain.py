"""Ordering bounded context — baskets, order products, addresses and checkouts.

Order products capture the product variant's price at the moment they are
added, read from the catalogue through the sibling lookup port.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
