"""Commerce bounded context: carts, addresses and the order lifecycle.

Orders are created from a user's cart, move through a fixed status
sequence (Pending → Placed → Confirmed → Shipped → Delivered, or
Cancelled), and can be queried by id or by user.
"""

from protean.domain import Domain

from commerce.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
commerce = Domain(name="commerce")
