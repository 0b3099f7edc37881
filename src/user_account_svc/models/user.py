from sqlalchemy import Column, Integer, String
from user_account_svc.models.base import Base


class User(Base):
    """
    SQLAlchemy model representing a user account.
    Attributes:
        id (int): Store-assigned unique identifier.
        email (str): User's email address.
        login (str): Login name used to authenticate. Indexed, not unique.
        hashed_password (str): bcrypt hash of the user's password.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False)
    login = Column(String, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
