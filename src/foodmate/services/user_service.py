"""User service for registration, login and lookup."""

import logging

from foodmate.auth.password_hasher import hash_password
from foodmate.models.user_models import (
    Customer,
    DeliveryPartner,
    RestaurantOwner,
    User,
    UserKind,
)
from foodmate.repositories.id_generator import IdGenerator
from foodmate.repositories.marketplace_repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing marketplace users.

    Registration generates the user id and hashes the password before the
    user is stored; plain-text passwords are never kept.
    """

    def __init__(self, user_repository: UserRepository, id_generator: IdGenerator) -> None:
        """Initialize the UserService.

        Args:
            user_repository: Repository holding every user
            id_generator: Source of new user ids
        """
        self.user_repository = user_repository
        self.id_generator = id_generator

    def register_customer(self, name: str, password: str, delivery_address: str) -> Customer:
        """Register a new customer."""
        customer = Customer(
            user_id=self.id_generator.next_user_id(),
            name=name,
            password_hash=hash_password(password),
            delivery_address=delivery_address,
        )
        self._register(customer)
        return customer

    def register_owner(self, name: str, password: str) -> RestaurantOwner:
        """Register a new restaurant owner."""
        owner = RestaurantOwner(
            user_id=self.id_generator.next_user_id(),
            name=name,
            password_hash=hash_password(password),
        )
        self._register(owner)
        return owner

    def register_partner(self, name: str, password: str, vehicle_type: str) -> DeliveryPartner:
        """Register a new delivery partner, available for assignment immediately."""
        partner = DeliveryPartner(
            user_id=self.id_generator.next_user_id(),
            name=name,
            password_hash=hash_password(password),
            vehicle_type=vehicle_type,
        )
        self._register(partner)
        return partner

    def login(self, user_id: str, password: str, kind: UserKind | None = None) -> User | None:
        """Authenticate a user.

        Args:
            user_id: User id to log in as
            password: Plain-text password
            kind: Expected user kind; a mismatch fails the login

        Returns:
            The logged-in user, or None if the id, password or kind is wrong
        """
        user = self.user_repository.get_user(user_id)
        if user is None:
            logger.info(f"Login failed for {user_id}: unknown user")
            return None

        if kind is not None and user.kind != kind:
            logger.info(f"Login failed for {user_id}: expected {kind.value}, got {user.kind.value}")
            return None

        if not user.authenticate(user_id, password):
            logger.info(f"Login failed for {user_id}: invalid password")
            return None

        return user

    def logout(self, user_id: str) -> bool:
        """Log a user out.

        Returns:
            bool: True if the user existed and was logged in
        """
        user = self.user_repository.get_user(user_id)
        return user.logout() if user is not None else False

    def find_user(self, user_id: str) -> User | None:
        """Look up a user by id, None if absent."""
        return self.user_repository.get_user(user_id)

    def _register(self, user: User) -> None:
        self.user_repository.save_user(user)
        logger.info(user.register_profile())
