import structlog

from .models import User
from .repository import UserRepository
from .schemas import UserCreate, UserUpdate

logger = structlog.get_logger(__name__)


class UserService:

    @staticmethod
    def create_user(repo: UserRepository, data: UserCreate) -> User:
        users = repo.read_users()
        user = User(first_name=data.first_name, last_name=data.last_name, age=data.age)
        users.append(user)
        repo.write_users(users)
        logger.info("user_created", user_id=user.id)
        return user

    @staticmethod
    def list_users(repo: UserRepository) -> list[User]:
        return repo.read_users()

    @staticmethod
    def get_user(repo: UserRepository, user_id: str) -> User | None:
        return next((u for u in repo.read_users() if u.id == user_id), None)

    @staticmethod
    def update_user(repo: UserRepository, user_id: str, data: UserUpdate) -> User | None:
        users = repo.read_users()
        for index, user in enumerate(users):
            if user.id == user_id:
                users[index] = user.model_copy(update=data.model_dump(exclude_none=True))
                repo.write_users(users)
                logger.info("user_updated", user_id=user_id)
                return users[index]
        logger.warning("user_not_found", user_id=user_id)
        return None

    @staticmethod
    def delete_user(repo: UserRepository, user_id: str) -> bool:
        users = repo.read_users()
        remaining = [u for u in users if u.id != user_id]
        if len(remaining) == len(users):
            logger.warning("user_not_found", user_id=user_id)
            return False
        repo.write_users(remaining)
        logger.info("user_deleted", user_id=user_id)
        return True
