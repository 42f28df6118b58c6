"""User repository."""

from sqlalchemy.exc import IntegrityError

from flowboard.errors import UserExists
from flowboard.models.user import User
from flowboard.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Persistence for user records."""

    def create(self, user: User) -> User:
        with self.store_errors("create user"):
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError as e:
                # unique index on email lost a race with another signup
                self.db.rollback()
                raise UserExists() from e
            self.db.refresh(user)
            return user

    def get_by_email(self, email: str) -> User | None:
        with self.store_errors("find user by email"):
            return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: int) -> User | None:
        with self.store_errors("find user by id"):
            return self.db.query(User).filter(User.id == user_id).first()
