# storefront/models/user_model.py
from sqlalchemy import Column, Integer, Text
from storefront.db import Base


class User(Base):
    __tablename__ = "users"

    # sqlite_autoincrement matches the AUTOINCREMENT in db.CREATE_USERS_TABLE
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    email = Column(Text)
    # plaintext, compared verbatim on login
    password = Column(Text)

    def __repr__(self):
        return f"<User id={self.id} name={self.name!r}>"
