"""
Review Service
==============

Customers review products from orders that reached them.
"""
import logging

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.models.identity import Identity
from app.domain.models.review import Review
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.review_repository import ReviewRepository
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewService:
    """Application service for product reviews."""

    def __init__(
        self,
        user_repository: UserRepository,
        order_repository: OrderRepository,
        review_repository: ReviewRepository,
    ):
        self._users = user_repository
        self._orders = order_repository
        self._reviews = review_repository

    def create(
        self,
        identity: Identity,
        order_id: str,
        product_id: str,
        rating: int,
        comment: str = "",
    ) -> Review:
        """
        Create a pending review.

        Args:
            identity: Reviewing customer
            order_id: Delivered order owned by the customer
            product_id: Reviewed product
            rating: 1 to 5
            comment: Free text

        Returns:
            The stored review

        Raises:
            NotFoundError: Unknown user
            BadRequestError: Order not delivered to this user, duplicate review or bad rating
        """
        user = self._users.find_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")

        if not MIN_RATING <= rating <= MAX_RATING:
            raise BadRequestError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        order = self._orders.find_delivered_for_user(order_id, user.id)
        if not order:
            raise BadRequestError("You cannot review this product")

        if self._reviews.exists_for(user.id, order.id, product_id):
            raise BadRequestError("You already reviewed this product")

        review = self._reviews.create(
            Review(
                user_id=user.id,
                order_id=order.id,
                product_id=product_id,
                rating=rating,
                comment=comment,
            )
        )
        logger.info(f"Review {review.id} created by user {user.id} for product {product_id}")
        return review
